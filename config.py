# Shell settings

# History ring: real entries kept, the empty sentinel slot is extra
MAX_HISTORY = 10

# Prompt
PROMPT_MAX_LENGTH = 16
PROMPT_SUFFIX = "% "

# Line editor key bytes
KEY_EOT = 0x04
KEY_NEWLINE = 0x0A
KEY_ESCAPE = 0x1B
KEY_BACKSPACE = 0x7F
KEY_DELETE = 0x7E
KEY_UP = 0x41
KEY_DOWN = 0x42

# Escape byte included
ESCAPE_SEQUENCE_LENGTH = 3

# Output redirection: -rw-r--r--, existing files are truncated
REDIRECT_FILE_MODE = 0o644
TRUNCATE_ON_REDIRECT = True

# ff
DEFAULT_SEARCH_PATH = "."
