# Константы для file explorer и editor tools

# Лимиты для поиска
MAX_SEARCH_RESULTS = 300
MAX_SEARCH_KB = 256
MAX_BYTE_SIZE = MAX_SEARCH_KB * 1024

# Лимиты для списков и дерева
DEFAULT_FILE_LIMIT = 100
MAX_FILE_LIMIT = 1000

# Сколько строк контекста показывать вокруг правки
SNIPPET_LINES = 4
