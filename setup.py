from setuptools import find_namespace_packages, setup

with open("requirements.txt") as f:
    install_reqs = f.read().strip().split("\n")

# Filter out comments/hashes
reqs = []
for req in install_reqs:
    if req.startswith("#") or req.startswith("    --hash="):
        continue
    reqs.append(str(req).rstrip(" \\"))

with open("test_requirements.txt") as f:
    test_reqs = [
        req.strip() for req in f.read().strip().split("\n") if not req.startswith("#")
    ]

setup(
    name="cryptoadvance.txoutproof",
    version="0.1.0",
    description="Decodes bitcoind's gettxoutproof output and renders its partial merkle tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cryptoadvance.*"]),
    python_requires=">=3.8",
    install_requires=reqs,
    extras_require={"test": test_reqs},
    entry_points={
        "console_scripts": [
            "txoutproof = cryptoadvance.txoutproof.cli:entry_point",
        ]
    },
)
