from __future__ import annotations
import argparse, json, sys
from asaas.errors import AsaasWebhookError
from asaas.webhook import TOKEN_HEADER, verify_and_parse


def main():
    ap = argparse.ArgumentParser(
        description="Verify a webhook auth token & parse the payload (offline sample)"
    )
    ap.add_argument("--token", required=True, help="authToken configured on the webhook")
    ap.add_argument("--header", required=True, help="Value received in the asaas-access-token header")
    ap.add_argument("--file", required=True, help="Path to JSON body file to verify/parse")
    args = ap.parse_args()

    with open(args.file, "rb") as f:
        body = f.read()
    headers = {TOKEN_HEADER: args.header}

    try:
        info, ev = verify_and_parse(body=body, headers=headers, token=args.token)
        print(json.dumps(ev.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
        print("\n[WEBHOOK] OK", "(event:", ev.event, ")")
    except AsaasWebhookError as e:
        print("[WEBHOOK] Verification failed:", e)
        sys.exit(2)


if __name__ == "__main__":
    main()
