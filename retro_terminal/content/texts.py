"""Canned terminal output: help, banners, manual pages and system tool mockups."""

HELP_LINES = [
    "help      - Show available commands",
    "skills    - List my technical skills",
    "projects  - View my projects",
    "experience- Show work history",
    "contact   - Get contact information",
    "about     - Display information about me",
    "resume    - Print my resume",
    "theme     - Toggle amber/green theme",
    "sound     - Toggle background hum",
    "clear     - Clear the terminal",
    "",
    "Files: ls cd pwd cat touch mkdir rm mv cp nvim",
    "Text:  head tail wc grep find echo",
    "Try 'man <command>' for details.",
]

COMMAND_NOT_FOUND = "Command not found: {command}\nType 'help' for a list of available commands."

BANNER = r"""
  ____  _____ _____ ____   ___
 |  _ \| ____|_   _|  _ \ / _ \
 | |_) |  _|   | | | |_) | | | |
 |  _ <| |___  | | |  _ <| |_| |
 |_| \_\_____| |_| |_| \_\\___/
"""

WELCOME = BANNER + """
RetroOS 1.0.0 - retro-terminal

Type 'help' to see available commands.
"""

HACK_REPORT = """
SYSTEM SECURITY ALERT
Timestamp: {timestamp}

[!] Unauthorized access attempt detected

CONNECTION DETAILS
  Source IP    : 127.0.0.1
  Protocol     : TCP/443
  Status       : BLOCKED
  Threat Level : LOW

SECURITY STATUS
  Firewall         : ACTIVE
  IDS/IPS          : MONITORING
  Auth Required    : YES
  Session          : TERMINATED

Result: ACCESS DENIED

Note: This is a portfolio website.
      No actual security systems were harmed.

Type 'help' for available commands.
"""

COFFEE = r"""
  Here's your coffee!

      ( (
       ) )
    .______.
    |      |]
    \      /
     '----'

  Now get back to coding!
"""

HELLO = "Hello there! Welcome to my portfolio terminal.\nType 'help' to see what you can explore!"

NEOFETCH = r"""
        .--.         {user}@{hostname}
       |o_o |        ------------------
       |:_/ |        OS: RetroOS 1.0.0
      //   \ \       Host: CRT Monitor
     (|     | )      Kernel: 5.15.0-retro
    /'\_   _/`\      Uptime: 42 mins
    \___)=(___/      Shell: bash 5.1.8
                     Terminal: retro-term
                     CPU: Intel 486 @ 66MHz
                     Memory: 2345 MiB / 8192 MiB
"""

COW = r"""
 {top}
< {text} >
 {bottom}
        \   ^__^
         \  (oo)\_______
            (__)\       )\/\
                ||----w |
                ||     ||
"""

FORTUNES = [
    "A journey of a thousand miles begins with a single step.",
    "The best time to plant a tree was 20 years ago. The second best time is now.",
    "Code is like humor. When you have to explain it, it's bad.",
    "First, solve the problem. Then, write the code.",
    "The only way to do great work is to love what you do.",
    "Debugging is twice as hard as writing the code in the first place.",
]

DF = """Filesystem     1K-blocks    Used Available Use% Mounted on
/dev/sda1      102400000 8234567  94165433   9% /
tmpfs            4096000       0   4096000   0% /dev/shm
/dev/sda2       51200000 2345678  48854322   5% /home"""

FREE = """              total        used        free      shared  buff/cache   available
Mem:        8192000     2345678     3456789      123456     2389533     5432100
Swap:       2097152           0     2097152"""

PS = """  PID TTY          TIME CMD
    1 pts/0    00:00:00 init
   42 pts/0    00:00:01 terminal
  101 pts/0    00:00:00 bash
  102 pts/0    00:00:00 ps"""

TOP = """top - {time} up 42 min, 1 user, load average: 0.00, 0.01, 0.05
Tasks:   4 total,   1 running,   3 sleeping,   0 stopped,   0 zombie
%Cpu(s):  2.0 us,  1.0 sy,  0.0 ni, 96.5 id,  0.5 wa,  0.0 hi,  0.0 si
MiB Mem:   8000.0 total,   3456.8 free,   2345.7 used,   2197.5 buff/cache

  PID USER      PR  NI    VIRT    RES    SHR S  %CPU  %MEM     TIME+ COMMAND
   42 {user:<9} 20   0  123456  12345   8765 S   1.0   0.2   0:01.23 terminal
    1 root      20   0   65432   4321   3210 S   0.0   0.1   0:00.10 init

(Press q to exit - simulated)"""

ENV = """USER={user}
HOME={home}
SHELL=/bin/bash
TERM=xterm-256color
PATH=/usr/local/bin:/usr/bin:/bin
LANG=en_US.UTF-8
PWD={pwd}
EDITOR=nvim"""

SHUTDOWN_MESSAGES = [
    "Broadcast message from root@{hostname}:",
    "",
    "The system is going down for poweroff NOW!",
    "",
    "Stopping all processes...",
    "Unmounting filesystems...",
    "Syncing disks...",
    "",
    "System halted.",
]

MAN_PAGES = {
    "ls": "ls - list directory contents\n\nUsage: ls [-l] [-a] [-h] [directory]\n\nList files in the current or specified directory.",
    "cd": "cd - change the working directory\n\nUsage: cd [directory|-]\n\nWith no argument or '-', return to the home directory.",
    "pwd": "pwd - print name of current directory\n\nUsage: pwd",
    "cat": "cat - concatenate files and print\n\nUsage: cat <file>...\n\nDisplay file contents.",
    "mkdir": "mkdir - make directories\n\nUsage: mkdir [-p] [-v] <directory>...\n\nCreate directories. Use -p to create parent directories.",
    "touch": "touch - create empty file\n\nUsage: touch <file>...\n\nCreate an empty file.",
    "rm": "rm - remove files\n\nUsage: rm [-rf] [-v] <file>...\n\nRemove files. Use -r for directories, -f to ignore missing files.\nRemoved entries are kept under ~/.trash.",
    "mv": "mv - move/rename files\n\nUsage: mv [-v] <source> <dest>\n\nMove or rename files and directories.",
    "cp": "cp - copy files\n\nUsage: cp [-r] [-v] <source> <dest>\n\nCopy files. Use -r to copy directories.",
    "head": "head - output the first part of files\n\nUsage: head [-n N|-N] <file>",
    "tail": "tail - output the last part of files\n\nUsage: tail [-n N|-N] <file>",
    "wc": "wc - print line, word and character counts\n\nUsage: wc [-l] [-w] [-c] <file>",
    "grep": "grep - search for patterns\n\nUsage: grep [-n] [-i] <pattern> <file>...\n\nSearch for pattern in file. Matching ignores case.",
    "find": "find - search for files\n\nUsage: find [path] [-name pattern] [-iname pattern] [-type f|d]",
    "nvim": "nvim - text editor\n\nUsage: nvim [file]\n\nOpen file in nvim editor. Creates new if not exists.",
    "echo": "echo - display text\n\nUsage: echo [-n] <text> [> file | >> file]\n\nDisplay text. Use > or >> for redirection.",
}


def get_texts() -> dict[str, str]:
    """Returns the standalone texts exposed outside the interpreter."""
    return {
        "welcome": WELCOME,
        "banner": BANNER,
        "help": "\n".join(HELP_LINES),
    }
