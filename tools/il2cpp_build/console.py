from colorama import Fore, Style, init

init()


def header(text: str) -> None:
    print(Fore.CYAN + "=" * 40)
    print(Fore.CYAN + f"   {text}")
    print(Fore.CYAN + "=" * 40 + Style.RESET_ALL)


def step(text: str) -> None:
    print(f"{Fore.YELLOW}{text}{Style.RESET_ALL}")


def success(text: str) -> None:
    print(f"{Fore.GREEN}{text}{Style.RESET_ALL}")


def warn(text: str) -> None:
    print(f"{Fore.MAGENTA}[WARN] {text}{Style.RESET_ALL}")


def error(text: str) -> None:
    print(f"{Fore.RED}[ERROR] {text}{Style.RESET_ALL}")


def info(text: str) -> None:
    print(f"  > {text}")
