"""
Demo entry point: python -m fruit_shop [--config PATH]
"""
import argparse
import sys
from typing import List, Optional

from .bootstrap import ShopBuilder


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="fruit-shop", description="Fruit shop command pattern demo")
    parser.add_argument("--config", default=None, help="JSON or TOML config file")
    args = parser.parse_args(argv)

    shop = ShopBuilder(args.config).build()

    shop.buy("Apples", 10)
    shop.buy("Bananas", 5)
    shop.sell("Apples", 3)

    shop.process()
    shop.display()
    return 0


if __name__ == "__main__":
    sys.exit(main())
