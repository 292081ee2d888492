# Константы интерпретатора команд

DEFAULT_LINE_COUNT = 10
LOADING_JITTER_MS = 400

# Команды с "загрузкой": текст индикатора, базовая длительность, прогресс-бар, hack-режим
LOADING_COMMANDS: dict[str, tuple[str, int, bool, bool]] = {
    "about": ("Loading profile data", 800, False, False),
    "skills": ("Scanning skill matrix", 900, False, False),
    "skill": ("Scanning skill matrix", 900, False, False),
    "projects": ("Fetching project data", 1000, False, False),
    "project": ("Fetching project data", 1000, False, False),
    "work": ("Fetching project data", 1000, False, False),
    "contact": ("Retrieving contact info", 700, False, False),
    "email": ("Retrieving contact info", 700, False, False),
    "experience": ("Loading work history", 900, False, False),
    "exp": ("Loading work history", 900, False, False),
    "hack": ("INITIATING HACK SEQUENCE", 3500, True, True),
    "matrix": ("INITIATING HACK SEQUENCE", 3500, True, True),
}

# Полные строки, которые сопоставляются до разбиения на токены
EXACT_COMMANDS: dict[str, tuple[str, list[str]]] = {
    "about me": ("about", []),
    "init 0": ("shutdown", []),
}

EDITOR_COMMANDS = ("nvim", "vim", "nano", "edit")

UNKNOWN_COMMAND_EXIT_CODE = 127
