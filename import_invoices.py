#!/usr/bin/env python
"""
CSV Invoice Import Script

Creates invoices through the Billing API from a CSV of invoice lines.
Rows sharing an InvoiceRef become one invoice; lines keep their file order.

Expected columns: InvoiceRef, CustomerID, ProductID, Quantity

Usage:
    python import_invoices.py data/invoices.csv
    python import_invoices.py data/invoices.csv --url http://localhost:8000
    python import_invoices.py data/invoices.csv --limit 100
"""
import argparse
import csv
import sys
from pathlib import Path
from typing import List, Dict, Any

import httpx


def group_invoice_lines(rows) -> List[Dict[str, Any]]:
    """
    Group CSV rows into invoice creation payloads.

    Args:
        rows: Iterable of dicts keyed by the CSV column headers

    Returns:
        One payload per InvoiceRef, in order of first appearance

    Raises:
        ValueError: If an InvoiceRef is used with two different customers
    """
    invoices: Dict[str, Dict[str, Any]] = {}

    for row in rows:
        ref = row["InvoiceRef"].strip()
        customer_id = int(row["CustomerID"])
        payload = invoices.setdefault(
            ref,
            {"customer_id": customer_id, "product_ids": [], "quantities": []},
        )
        if payload["customer_id"] != customer_id:
            raise ValueError(
                f"InvoiceRef {ref} is used for customers {payload['customer_id']} and {customer_id}"
            )
        payload["product_ids"].append(int(row["ProductID"]))
        payload["quantities"].append(int(row["Quantity"]))

    return list(invoices.values())


def read_csv_invoices(file_path: Path, limit: int = None) -> List[Dict[str, Any]]:
    """
    Read invoice payloads from a CSV file.

    Args:
        file_path: Path to CSV file
        limit: Optional limit on number of invoices to return

    Returns:
        List of invoice payloads ready for the API
    """
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        invoices = group_invoice_lines(csv.DictReader(f))

    if limit:
        invoices = invoices[:limit]
    return invoices


def send_invoice(
    client: httpx.Client,
    invoice: Dict[str, Any],
    api_url: str,
) -> Dict[str, Any]:
    """
    Create one invoice through the API.

    Raises:
        httpx.HTTPError: If API request fails
    """
    response = client.post(f"{api_url}/invoices", json=invoice)
    response.raise_for_status()
    return response.json()


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Import invoices from CSV to the Billing API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/invoices.csv
  %(prog)s data/invoices.csv --limit 100 --url http://localhost:8000
  %(prog)s data/invoices.csv --timeout 60 --keep-going
        """
    )

    parser.add_argument(
        "csv_file",
        type=Path,
        help="Path to CSV file with invoice lines"
    )

    parser.add_argument(
        "--url",
        type=str,
        default="http://localhost:8000",
        help="Base API URL (default: http://localhost:8000)"
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of invoices to import (default: all)"
    )

    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds (default: 30)"
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the next invoice when one is rejected"
    )

    args = parser.parse_args()

    if not args.csv_file.is_file():
        print(f"❌ Error: File not found: {args.csv_file}", file=sys.stderr)
        sys.exit(1)

    print(f"📂 Reading invoice lines from {args.csv_file}")

    try:
        invoices = read_csv_invoices(args.csv_file, args.limit)
    except (ValueError, KeyError) as e:
        print(f"❌ Error reading CSV: {e}", file=sys.stderr)
        sys.exit(1)

    if not invoices:
        print("⚠️  No invoices found in CSV", file=sys.stderr)
        sys.exit(1)

    print(f"✅ Loaded {len(invoices)} invoice(s)")

    created = 0
    failed = 0

    with httpx.Client(timeout=args.timeout) as client:
        for i, invoice in enumerate(invoices, start=1):
            print(
                f"   Invoice {i}/{len(invoices)}: customer {invoice['customer_id']}, "
                f"{len(invoice['product_ids'])} line(s)...",
                end=" ",
            )
            try:
                response = send_invoice(client, invoice, args.url)
            except httpx.HTTPStatusError as e:
                print("❌ Rejected", file=sys.stderr)
                print(f"   API Response: {e.response.text}", file=sys.stderr)
                failed += 1
                if not args.keep_going:
                    sys.exit(1)
                continue
            except httpx.HTTPError as e:
                print("❌ Failed", file=sys.stderr)
                print(f"   Error: {e}", file=sys.stderr)
                sys.exit(1)

            created += 1
            print(f"✅ invoice {response['id']}, total {response['total']}")

    print(f"\n🎉 Import complete! Created {created} invoice(s), {failed} rejected")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
