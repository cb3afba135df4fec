from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, print_error
from asaas.errors import AsaasHTTPError
from asaas.utils import format_brl

def main():
    ap = argparse.ArgumentParser(description="List charges (walks every page)")
    add_common_args(ap)
    ap.add_argument("--customer", default=None, help="Filter by customer id")
    ap.add_argument("--status", default=None, help="Filter by status, e.g. PENDING")
    ap.add_argument("--max-pages", type=int, default=None)
    args = ap.parse_args()

    filters = {}
    if args.customer:
        filters["customer"] = args.customer
    if args.status:
        filters["status"] = args.status

    client = make_client_from_args(args)
    try:
        try:
            n = 0
            for ch in client.charges.iter_all(max_pages=args.max_pages, **filters):
                n += 1
                print(f"{ch.id}  {str(ch.status):<20} {format_brl(ch.value or 0):>14}  due {ch.due_date}")
            print(f"[LIST] {n} charge(s)")
        except AsaasHTTPError as e:
            print_error("LIST", e)
    finally:
        client.close()

if __name__ == "__main__":
    main()
