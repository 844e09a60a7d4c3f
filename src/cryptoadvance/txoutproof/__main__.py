from .cli import entry_point

if __name__ == "__main__":
    # logging gets configured within the entry_point, see cli.utils.setup_logging
    entry_point()
