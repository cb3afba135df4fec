from __future__ import annotations
import argparse
from datetime import date
from _common import add_common_args, make_client_from_args, pretty, print_error
from asaas.errors import AsaasHTTPError

def main():
    ap = argparse.ArgumentParser(description="Create a recurring subscription")
    add_common_args(ap)
    ap.add_argument("--customer", required=True, help="Customer id (cus_...)")
    ap.add_argument("--value", required=True, help="Amount per cycle in BRL")
    ap.add_argument(
        "--cycle",
        required=True,
        choices=["weekly", "biweekly", "monthly", "bimonthly", "quarterly", "semiannually", "yearly"],
        help="Billing interval",
    )
    ap.add_argument("--billing-type", default="BOLETO", choices=["PIX", "BOLETO", "UNDEFINED"])
    ap.add_argument("--next-due-date", default=None, help="First due date (YYYY-MM-DD, default today)")
    args = ap.parse_args()

    next_due = date.fromisoformat(args.next_due_date) if args.next_due_date else date.today()
    client = make_client_from_args(args)
    try:
        try:
            sub = client.subscriptions.create(
                customer=args.customer,
                billing_type=args.billing_type,
                value=args.value,
                cycle=args.cycle,
                next_due_date=next_due,
            )
            print(pretty(sub.model_dump(mode="json", by_alias=True)))
        except AsaasHTTPError as e:
            print_error("SUB CREATE", e)
    finally:
        client.close()

if __name__ == "__main__":
    main()
