# unixplay

A collection of small Unix command-line tools and short demonstrations. They cover files, directories, terminals, signals, processes, pipes and sockets. Each tool is built on ordinary Python functions, so you can run it from the shell or call it from your own code.

The package needs a POSIX system. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Files and directories

- `unixplay-more [FILE ...]` shows text 24 lines at a time. With no file it reads standard input. Replies are read from `/dev/tty`:
  - space shows the next page
  - Enter shows one more line
  - `q` or end of input stops
- `unixplay-cp SOURCE DESTINATION` copies a file. A newly created destination gets mode 0644. Errors are reported on standard error and the exit status is 1.
- `unixplay-who [FILE]` lists logged-in users. It reads the utmp file, which is `/var/run/utmp` unless you give another one. For each user process it shows the user, the terminal, the login time, and the remote host in parentheses when there is one. Records are decoded in the Linux x86-64 utmp layout.
- `unixplay-ls [-a] [DIR ...]` lists the names in each directory, `.` by default. Names starting with a dot are shown only with `-a`.
- `unixplay-ls-long [DIR ...]` gives a long listing with these columns:
  - mode letters
  - link count
  - owner
  - group
  - size
  - modification time
  - name
- `unixplay-spwd` prints the current directory. It builds the path by walking up through the parent directories and matching inodes.

### Terminal

- `unixplay-showtty` reports the settings of the terminal on standard input:
  - the output baud rate (`Fast` above 9600)
  - the erase and line-kill characters
  - the input mode flags and the local mode flags, each ON or OFF
- `unixplay-play-again` asks "Do you want another transaction (y/n)?" with canonical input and echo turned off. Other keys are ignored. It exits with status 0 for `y`/`Y`, and 1 for `n`/`N` or end of input. The terminal mode is restored afterwards.
- `unixplay-play-again-timed` asks the same question with non-blocking input. It checks for an answer every 5 seconds and beeps when there is none. It exits with status 2 once three further checks go unanswered.
- `unixplay-banner` draws "Hello world" down the screen, stepping two columns right on each line and showing every other line in reverse video. It waits for a key before it exits. `unixplay-banner bounce` instead moves "Hello" back and forth between columns 10 and 30 on row 10, one step a second, until you interrupt it.

### Shells

- `unixplay-smsh` is a small shell with a `>` prompt. It ignores interrupt and quit signals, splits each line on spaces and tabs, and runs the command. It also understands `if` / `then` / `fi`:
  - `if CMD` runs CMD.
  - A following `then` line starts a block. That line and the command lines that follow it run only if CMD succeeded.
  - `fi` ends the block.
  - Out-of-place control words are reported as syntax errors on standard error.
- `unixplay-promptsh` asks for a command one argument per line (`arg[0]?`, `arg[1]?`, …). An empty line runs the command and prints `child exited with status EXIT, SIGNAL`. It stops at end of input, or once 20 arguments have been collected.
- `unixplay-showenv` prints every environment variable as `name=value`.
- `unixplay-getlang` prints the value of `LANG`, if it is set.

### Pipes and networking

- `unixplay-pip CMD1 CMD2` runs `CMD1 | CMD2` and exits with CMD2's status. Each command is a single program name with no arguments.
- `unixplay-pipe-echo` reports the pipe's file descriptors. It then sends each input line through the pipe and prints what comes back out.
- `unixplay-tinybc` is a calculator front end for `dc`, which must be installed. Enter expressions such as `3 + 4`. The operators are `+ - * / ^`. A line that is not `number operator number` prints `syntax error`.
- `unixplay-timeserv` serves the current time over TCP on port 13000. It binds to the address of the local host name. Every caller receives `the time is ..` followed by the date, and the server prints `Get a call` for each one.
- `unixplay-timeclnt HOST PORT` connects to a time server and prints its reply. It exits with status 1 if the host is unknown, 2 if the connection fails, and 3 if reading fails.

### Signals, timers and processes

- `unixplay-sigdemo [hello | sigaction | prompt]` runs one of three signal demonstrations. `prompt` is the default.
  - `prompt` echoes messages until one starts with `quit`. It reports each interrupt or quit signal it receives.
  - `hello` prints "hello world" five times, once a second, and answers interrupts with "oohps".
  - `sigaction` echoes input lines. It handles only the first interrupt, and blocks quit while doing so.
- `unixplay-ticker [MSECS | --sleep]` counts down from 10 to 0 on an interval timer, 500 ms by default, then prints `DONE!`. With `--sleep` it prints two lines two seconds apart instead.
- `unixplay-procdemo DEMO` runs one process demonstration:
  - `pid` prints its process id ten times.
  - `shared` writes `testfile` from a parent and a forked child through one descriptor.
  - `exec` replaces itself with `ls -l`.
  - `fork1`, `fork2` and `fork3` show the different results of forking.
  - `wait1` and `wait2` fork a child that exits with status 17 and wait for it. `wait2` also prints the decoded status.
  - `redir` reads three lines from standard input, then three from `/etc/passwd` reopened as descriptor 0.

## Library use

The functions behind the commands can be called directly:

```python
from unixplay.splitline import splitline
from unixplay.varlib import VariableTable
from unixplay.ls import mode_to_letters
from unixplay.tinybc import parse_expression
from unixplay.procdemo import decode_status

splitline("ls  -l\t/tmp")          # ['ls', '-l', '/tmp']
mode_to_letters(0o40755)           # 'drwxr-xr-x'
parse_expression("6 * 7")          # (6, '*', 7)
decode_status(17 << 8)             # WaitStatus(exit=17, signal=0, core=0)

table = VariableTable()
table.store("EDITOR", "vi")
table.export("EDITOR")
table.lookup("EDITOR")             # 'vi'
table.listing()                    # ['* EDITOR=vi']
```

`VariableTable` holds at most 200 variables. When it is full it raises `TableFullError`.

`unixplay.popen.popen(command, mode)` starts `command` under `/bin/sh`. It returns a stream reading the command's output when the mode starts with `"r"`, or feeding its input when the mode starts with `"w"`. A `"b"` in the mode gives a binary stream. Closing the stream waits for the command and returns its exit status. Any other mode raises `ValueError`.

`unixplay.process.CommandProcessor` carries the `if` / `then` / `fi` logic of the shell. You can give it your own runner function in place of `execute`.

## What it does not do

- The `unixplay-smsh` shell has no built-in commands: no variable assignment, `export`, `set` or `cd`. It also has no pipes, redirection or quoting. `VariableTable` is a separate library class and is not used by the shell.
- `unixplay-pip` cannot pass arguments to either command.
- `unixplay-tinybc` does no arithmetic itself; it needs the external `dc` program.