"""
retailpos management CLI.

Usage:
    python -m retailpos init [--no-seed]      Create schema and seed demo data
    python -m retailpos products              List products and stock
    python -m retailpos logs [--product ID]   Show the inventory audit trail
    python -m retailpos sale-status ID STATUS Move a sale to Pending/Completed/Returned
    python -m retailpos adjust ID KIND QTY    Stock-in or stock-take a product
    python -m retailpos stats [--from D --to D]  Dashboard figures and sales report
    python -m retailpos verify                Check stock against the audit trail
    python -m retailpos export PATH           Write every collection to a JSON file
    python -m retailpos import PATH           Replace collections from a JSON file
"""

import argparse
import asyncio
import json
import sys
from datetime import date
from pathlib import Path

from retailpos.application import AppState, open_app_state
from retailpos.application.use_cases import ImportDataUseCase
from retailpos.config import configure_logging, get_settings
from retailpos.core.entities import AdjustmentKind, SaleStatus, StockAdjustment
from retailpos.core.exceptions import POSError

_ADJUST_KINDS = {"stock-in": AdjustmentKind.STOCK_IN, "stock-take": AdjustmentKind.STOCK_TAKE}


def _money(amount: float) -> str:
    return f"{amount:,.0f} {get_settings().pos.currency}"


async def cmd_init(state: AppState, args: argparse.Namespace) -> int:
    print(f"Database ready: {get_settings().storage.db_path}")
    print(f"  products: {len(state.products)}  sales: {len(state.sales)}")
    return 0


async def cmd_products(state: AppState, args: argparse.Namespace) -> int:
    for p in state.products:
        print(f"{p.id}  {p.name:<28} stock={p.quantity_in_stock:>5}  price={_money(p.selling_price)}")
    return 0


async def cmd_logs(state: AppState, args: argparse.Namespace) -> int:
    for log in state.inventory_logs:
        if args.product and log.product_id != args.product:
            continue
        sale = f" sale={log.sale_id}" if log.sale_id else ""
        print(
            f"{log.created_at:%Y-%m-%d %H:%M:%S}  {log.log_type.value:<10} "
            f"{log.product_name:<28} {log.quantity_change:+d} -> {log.new_quantity}{sale}"
        )
    return 0


async def cmd_sale_status(state: AppState, args: argparse.Namespace) -> int:
    sale = await state.update_sale_status(args.sale_id, SaleStatus(args.status))
    print(f"Sale {sale.id} is now {sale.status.value}.")
    return 0


async def cmd_adjust(state: AppState, args: argparse.Namespace) -> int:
    adjustment = StockAdjustment(kind=_ADJUST_KINDS[args.kind], quantity=args.quantity)
    product = await state.adjust_inventory(args.product_id, None, adjustment)
    print(f"{product.name}: stock is now {product.quantity_in_stock}.")
    return 0


async def cmd_stats(state: AppState, args: argparse.Namespace) -> int:
    stats = state.dashboard_stats()
    print(f"Estimated revenue: {_money(stats.total_estimated_revenue)}")
    print(f"Actual revenue:    {_money(stats.total_actual_revenue)}")
    print(f"Cost of goods:     {_money(stats.cost_of_goods_sold)}")
    print(f"Expenses:          {_money(stats.total_expenses)}")
    print(f"Net profit:        {_money(stats.net_profit)}")
    print()
    for point in state.daily_revenue():
        print(f"  {point.label}  revenue={_money(point.revenue)}  gross={_money(point.gross_profit)}")

    report = state.sales_report(args.start, args.end)
    period = f"{args.start or '...'} to {args.end or '...'}"
    print()
    print(f"Sales {period}: {report.total_sales}")
    print(f"  revenue={_money(report.total_revenue)}  gross={_money(report.gross_profit)}")
    return 0


async def cmd_verify(state: AppState, args: argparse.Namespace) -> int:
    discrepancies = await state.verify_stock()
    if not discrepancies:
        print(f"OK: {len(state.products)} products agree with the audit trail.")
        return 0
    for d in discrepancies:
        print(f"{d.product_id}  {d.product_name}: {d.reason} expected={d.expected} actual={d.actual}")
    return 1


async def cmd_export(state: AppState, args: argparse.Namespace) -> int:
    document = await state.export_data()
    Path(args.path).write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Exported {sum(len(v) for v in document.values())} records to {args.path}.")
    return 0


async def cmd_import(state: AppState, args: argparse.Namespace) -> int:
    document = ImportDataUseCase.parse(Path(args.path).read_text(encoding="utf-8"))
    result = await state.import_data(document)
    for key, count in result.imported.items():
        print(f"  {key}: {count}")
    if result.ignored_keys:
        print(f"Ignored keys: {', '.join(result.ignored_keys)}")
    return 0


async def _run(args: argparse.Namespace) -> int:
    seed = False if getattr(args, "no_seed", False) else None
    async with open_app_state(seed=seed) as state:
        return await args.func(state, args)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="retailpos",
        description="retailpos management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init", help="Create schema and seed demo data")
    p_init.add_argument("--no-seed", action="store_true", help="Skip demo data")
    p_init.set_defaults(func=cmd_init)

    p_products = sub.add_parser("products", help="List products and stock")
    p_products.set_defaults(func=cmd_products)

    p_logs = sub.add_parser("logs", help="Show the inventory audit trail, newest first")
    p_logs.add_argument("--product", default=None, help="Only this product ID")
    p_logs.set_defaults(func=cmd_logs)

    p_status = sub.add_parser("sale-status", help="Change a sale's status")
    p_status.add_argument("sale_id")
    p_status.add_argument("status", choices=[s.value for s in SaleStatus])
    p_status.set_defaults(func=cmd_sale_status)

    p_adjust = sub.add_parser("adjust", help="Stock-in or stock-take a product")
    p_adjust.add_argument("product_id")
    p_adjust.add_argument("kind", choices=sorted(_ADJUST_KINDS))
    p_adjust.add_argument("quantity", type=int)
    p_adjust.set_defaults(func=cmd_adjust)

    p_stats = sub.add_parser("stats", help="Dashboard figures and sales report")
    p_stats.add_argument(
        "--from", dest="start", type=date.fromisoformat, default=None, help="First day, YYYY-MM-DD (UTC)"
    )
    p_stats.add_argument(
        "--to", dest="end", type=date.fromisoformat, default=None, help="Last day, YYYY-MM-DD (UTC)"
    )
    p_stats.set_defaults(func=cmd_stats)

    p_verify = sub.add_parser("verify", help="Check stock against the audit trail")
    p_verify.set_defaults(func=cmd_verify)

    p_export = sub.add_parser("export", help="Export every collection to JSON")
    p_export.add_argument("path")
    p_export.set_defaults(func=cmd_export)

    p_import = sub.add_parser("import", help="Import collections from JSON")
    p_import.add_argument("path")
    p_import.set_defaults(func=cmd_import)

    args = parser.parse_args(argv)
    configure_logging()
    try:
        return asyncio.run(_run(args))
    except POSError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
