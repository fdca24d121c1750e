import argparse
import logging
import os
import sys
from pathlib import Path

from src.adapters.chain_stub import OfflineHost
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.app_shell.context import LedgerContext
from src.components.ledger import (
    SetCommissionRateInput,
    TransferAdministrationInput,
    run_set_commission_rate,
    run_transfer_administration,
)
from src.components.ledger.models import LedgerOperationOutput
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

DATA_DIR = os.environ.get("LEDGER_DATA_DIR", "data")
RULES_PATH = os.environ.get("LEDGER_RULES_PATH", "rules.yaml")


def db_path() -> str:
    return str(Path(DATA_DIR) / "ledger.db")


def get_context() -> LedgerContext:
    if not Path(RULES_PATH).exists():
        logger.error(f"Rules file {RULES_PATH} not found.")
        sys.exit(1)

    rules = load_rules(Path(RULES_PATH))
    Path(DATA_DIR).mkdir(parents=True, exist_ok=True)
    # Operator commands never move value, so no host chain is attached
    host = OfflineHost()
    return LedgerContext.create(db_path(), rules, transfer=host, blocks=host)


def report(result: LedgerOperationOutput) -> None:
    if result.error:
        logger.error(f"[{result.error.code} {result.error.error}] {result.error.message}")
        sys.exit(2)


def handle_migrate(args: argparse.Namespace) -> None:
    Path(DATA_DIR).mkdir(parents=True, exist_ok=True)
    applied = SQLiteMigrator(db_path()).run_migrations()
    print(f"Applied {len(applied)} migration(s).")


def handle_info(ctx: LedgerContext, args: argparse.Namespace) -> None:
    ledger = ctx.ledger
    print(f"Administrator: {ledger.get_administrator()}")
    print(f"Commission:    {ledger.get_commission_rate()} permille")
    print(f"Escrow:        {ledger.escrow_account}")


def handle_content(ctx: LedgerContext, args: argparse.Namespace) -> None:
    content = ctx.ledger.get_content_info(args.content_id)
    if content is None:
        logger.error(f"Content {args.content_id} not found.")
        sys.exit(1)
    print(content.model_dump_json(indent=2))


def handle_balance(ctx: LedgerContext, args: argparse.Namespace) -> None:
    balance = ctx.ledger.get_creator_balance(args.creator)
    if balance is None:
        logger.error(f"No earnings record for {args.creator}.")
        sys.exit(1)
    print(f"{args.creator}: {balance}")


def handle_set_commission(ctx: LedgerContext, args: argparse.Namespace) -> None:
    result = run_set_commission_rate(SetCommissionRateInput(new_rate=args.rate), ctx.ledger, args.caller)
    report(result)
    print(f"Commission set to {args.rate} permille.")


def handle_transfer_admin(ctx: LedgerContext, args: argparse.Namespace) -> None:
    result = run_transfer_administration(
        TransferAdministrationInput(new_admin=args.new_admin), ctx.ledger, args.caller
    )
    report(result)
    print(f"Administration transferred to {args.new_admin}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Content Ledger CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # info
    subparsers.add_parser("info", help="Show administrator and commission")

    # content
    content_parser = subparsers.add_parser("content", help="Show a content record")
    content_parser.add_argument("content_id", type=int)

    # balance
    balance_parser = subparsers.add_parser("balance", help="Show a creator's earnings")
    balance_parser.add_argument("creator")

    # set-commission
    commission_parser = subparsers.add_parser("set-commission", help="Change the commission rate")
    commission_parser.add_argument("rate", type=int, help="Thousandths, 0..1000")
    commission_parser.add_argument("--caller", required=True, help="Administrator principal")

    # transfer-admin
    admin_parser = subparsers.add_parser("transfer-admin", help="Hand over administration")
    admin_parser.add_argument("new_admin")
    admin_parser.add_argument("--caller", required=True, help="Current administrator principal")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    if args.command == "migrate":
        handle_migrate(args)
        return

    ctx = get_context()
    try:
        if args.command == "info":
            handle_info(ctx, args)
        elif args.command == "content":
            handle_content(ctx, args)
        elif args.command == "balance":
            handle_balance(ctx, args)
        elif args.command == "set-commission":
            handle_set_commission(ctx, args)
        elif args.command == "transfer-admin":
            handle_transfer_admin(ctx, args)
    finally:
        ctx.close()


if __name__ == "__main__":
    main()
