from __future__ import annotations
import argparse
from datetime import date, timedelta
from _common import add_common_args, make_client_from_args, pretty, print_error
from asaas.errors import AsaasHTTPError

def main():
    ap = argparse.ArgumentParser(description="Create a boleto/PIX charge")
    add_common_args(ap)
    ap.add_argument("--customer", required=True, help="Customer id (cus_...)")
    ap.add_argument("--value", required=True, help="Amount in BRL, e.g. 150.50")
    ap.add_argument("--billing-type", default="PIX", choices=["PIX", "BOLETO", "UNDEFINED"])
    ap.add_argument("--due-in", type=int, default=3, help="Days until due date (default 3)")
    ap.add_argument("--description", default=None)
    ap.add_argument("--wait", action="store_true", help="Poll until the charge is settled")
    args = ap.parse_args()

    due = date.today() + timedelta(days=args.due_in)
    print("[RUN] Creating charge")
    print(f"  customer  : {args.customer}")
    print(f"  value     : {args.value}")
    print(f"  type      : {args.billing_type}")
    print(f"  due date  : {due.isoformat()}")

    client = make_client_from_args(args)
    try:
        try:
            fields = {
                "customer": args.customer,
                "billing_type": args.billing_type,
                "value": args.value,
                "due_date": due,
            }
            if args.description:
                fields["description"] = args.description
            ch = client.charges.create(**fields)
            if args.billing_type == "PIX":
                qr = client.charges.get_pix_qr_code(ch.id)
                print("[RUN] PIX copy-and-paste:", qr.payload)
            if args.wait:
                ch = client.charges.wait_until_terminal(ch.id, timeout_s=300, interval_s=5.0)
            print(pretty(ch.model_dump(mode="json", by_alias=True)))
        except AsaasHTTPError as e:
            print_error("CHARGE", e)
    finally:
        client.close()

if __name__ == "__main__":
    main()
