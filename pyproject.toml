[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maavalidatejwt"
version = "0.1.0"
description = "Check attestation JWTs: fetch the signing keys, read the X.509 certificate and look for an embedded enclave quote"
requires-python = ">=3.10"
keywords = ["jwt", "jwks", "x509", "attestation", "sgx", "enclave", "quote"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
maavalidatejwt = "maavalidatejwt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["maavalidatejwt"]

[tool.pytest.ini_options]
addopts = "-ra"
