"""Terminal output helpers with colors."""

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
NC = "\033[0m"


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}[prchain]{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}[prchain]{NC} {msg}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}[prchain]{NC} {msg}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}[prchain]{NC} {msg}")


def success_with_detail(msg: str, detail: str) -> None:
    """Print success message with a gray trailing detail."""
    print(f"\r\033[K{GREEN}[prchain]{NC} {msg}  {GRAY}{detail}{NC}")


def error_with_detail(msg: str, detail: str) -> None:
    """Print error message with a gray trailing detail."""
    print(f"\r\033[K{RED}[prchain]{NC} {msg}  {GRAY}{detail}{NC}")
