"""
Basic usage: optional lookups, fallible parsing, and batch helpers.

Run: python examples/basic_usage.py
"""
from oxide import (
    Option,
    Result,
    NONE,
    from_nullable,
    as_result,
    match_result,
    filter_map_result,
    ConsoleLogger,
    set_logger,
)


USERS = {1: {"name": "ada", "manager": 2}, 2: {"name": "grace"}}


def find_user(uid: int) -> Option[dict]:
    return from_nullable(USERS.get(uid))


@as_result(ValueError)
def parse_port(raw: str) -> int:
    port = int(raw)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def main():
    # Show captured exceptions on stderr
    set_logger(ConsoleLogger(level="DEBUG"))

    # Chain lookups without nested None checks
    manager = find_user(1).and_then(lambda u: from_nullable(u.get("manager"))).and_then(find_user)
    print("manager of 1 =>", manager.map(lambda u: u["name"]).unwrap_or("nobody"))   # grace
    print("manager of 2 =>", find_user(2).and_then(lambda u: from_nullable(u.get("manager"))) is NONE)  # True

    # Explicit failures instead of exceptions
    r: Result[int, Exception] = parse_port("80x")
    print("parse 80x =>", match_result(r, ok=str, err=lambda e: f"invalid ({e})"))

    ports = filter_map_result([parse_port("80"), parse_port("99999"), parse_port("443")], lambda p: parse_port(str(p)))
    print("valid ports =>", [p.unwrap() for p in ports])   # [80, 443]


if __name__ == "__main__":
    main()
