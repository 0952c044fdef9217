[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unixplay"
version = "0.1.0"
description = "Small Unix tools and process, terminal, signal, pipe and socket demonstrations"
requires-python = ">=3.10"
dependencies = []
keywords = ["unix", "shell", "more", "ls", "who", "pipes", "signals", "sockets", "termios"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unixplay-more = "unixplay.more:main"
unixplay-cp = "unixplay.cp:main"
unixplay-who = "unixplay.who:main"
unixplay-ls = "unixplay.ls:main"
unixplay-ls-long = "unixplay.ls:main_long"
unixplay-spwd = "unixplay.spwd:main"
unixplay-showtty = "unixplay.showtty:main"
unixplay-play-again = "unixplay.playagain:main"
unixplay-play-again-timed = "unixplay.playagain:main_timed"
unixplay-smsh = "unixplay.smsh:main"
unixplay-showenv = "unixplay.envtools:main"
unixplay-getlang = "unixplay.envtools:main_lang"
unixplay-promptsh = "unixplay.promptsh:main"
unixplay-tinybc = "unixplay.tinybc:main"
unixplay-timeserv = "unixplay.timenet:main_server"
unixplay-timeclnt = "unixplay.timenet:main_client"
unixplay-pip = "unixplay.pipetools:main"
unixplay-pipe-echo = "unixplay.pipetools:main_echo"
unixplay-ticker = "unixplay.ticker:main"
unixplay-sigdemo = "unixplay.sigdemo:main"
unixplay-procdemo = "unixplay.procdemo:main"
unixplay-banner = "unixplay.banner:main"

[tool.hatch.build.targets.wheel]
packages = ["unixplay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
