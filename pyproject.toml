[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netcrypt"
version = "0.1.0"
description = "Classical ciphers, toy public-key schemes, CRC checksums and a leaky-bucket simulator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "caesar",
    "vigenere",
    "playfair",
    "rsa",
    "diffie-hellman",
    "crc",
    "leaky-bucket",
    "networking",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netcrypt-diffie-hellman = "netcrypt.diffie_hellman:main"
netcrypt-caesar = "netcrypt.caesar:main"
netcrypt-crc = "netcrypt.crc:main"
netcrypt-leaky-bucket = "netcrypt.leaky_bucket:main"
netcrypt-playfair = "netcrypt.playfair:main"
netcrypt-rsa = "netcrypt.rsa:main"
netcrypt-vigenere = "netcrypt.vigenere:main"

[tool.hatch.build.targets.wheel]
packages = ["netcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
