from __future__ import annotations

CLOSE_PROMPT = "[To close this prompt: <Esc>](fg:white)"

DEFAULT_HELP: tuple[str, ...] = (
    "",
    CLOSE_PROMPT,
)

MAIN_COMMAND_HELP: tuple[str, ...] = (
    "Quit: q or <C-c>",
    "Pause Rendering: s",
    "Table Selection: <Left>/h and <Right>/l",
    "Table Scrolling: <Up>/k and <Down>/j",
    "Enable CPU Table: t",
    "",
    CLOSE_PROMPT,
)

PROC_COMMAND_HELP: tuple[str, ...] = (
    "Quit: q or <C-c>",
    "Pause Rendering: s",
    "",
    "[Process navigation](fg:white)",
    "  - k and <Up>: up",
    "  - j and <Down>: down",
    "  - <C-u>: half page up",
    "  - <C-d>: half page down",
    "  - <C-b>: full page up",
    "  - <C-f>: full page down",
    "  - gg and <Home>: jump to top",
    "  - G and <End>: jump to bottom",
    "",
    "[Sorting](fg:white)",
    "  - Use column number to sort ascending.",
    "  - Use <F-column number> to sort descending.",
    "  - Eg: 1 to sort ascending on 1st Col and F1 for descending",
    "  - 0: Disable Sort",
    "",
    "[Process actions](fg:white)",
    "  - K and <F9>: Open signal selector menu",
    "",
    "[Signal selection](fg:white)",
    "  - K and <F9>: Send SIGTERM to selected process. Kills the process",
    "  - k and <Up>: up",
    "  - j and <Down>: down",
    "  - 0-9: navigate by numeric index",
    "  - <Enter>: send highlighted signal to process",
    "  - <Esc>: close signal selector",
    "",
    CLOSE_PROMPT,
)

PER_PROC_COMMAND_HELP: tuple[str, ...] = (
    "Quit: q or <C-c>",
    "Pause Rendering: s",
    "",
    CLOSE_PROMPT,
)

CONTAINER_COMMAND_HELP: tuple[str, ...] = (
    "Quit: q or <C-c>",
    "Pause Rendering: s",
    "",
    "[Container navigation](fg:white)",
    "  - k and <Up>: up",
    "  - j and <Down>: down",
    "  - <C-u>: half page up",
    "  - <C-d>: half page down",
    "  - <C-b>: full page up",
    "  - <C-f>: full page down",
    "  - gg and <Home>: jump to top",
    "  - G and <End>: jump to bottom",
    "",
    "[Sorting](fg:white)",
    "  - Use column number to sort ascending.",
    "  - Use <F-column number> to sort descending.",
    "  - Eg: 1 to sort ascending on 1st Col and F1 for descending",
    "  - 0: Disable Sort",
    "",
    "[Container actions](fg:white)",
    "  - P: pause a container",
    "  - U: unpause a container",
    "  - R: restart a container",
    "  - S: stop a container",
    "  - K: kill a container",
    "  - X: remove a container (removes links & volumes)",
    "",
    CLOSE_PROMPT,
)

PER_CONTAINER_COMMAND_HELP: tuple[str, ...] = (
    "Quit: q or <C-c>",
    "Pause Rendering: s",
    "",
    "[Table Selection](fg:white)",
    "  - 1: MountTable",
    "  - 2: NetworkTable",
    "  - 3: CPUUsageTable",
    "  - 4: PortMapTable",
    "  - 5: ProcTable",
    "",
    "[Table navigation](fg:white)",
    "  - k and <Up>: up",
    "  - j and <Down>: down",
    "  - <C-u>: half page up",
    "  - <C-d>: half page down",
    "  - <C-b>: full page up",
    "  - <C-f>: full page down",
    "  - gg and <Home>: jump to top",
    "  - G and <End>: jump to bottom",
    "",
    CLOSE_PROMPT,
)
