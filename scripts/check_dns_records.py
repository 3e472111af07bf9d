#!/usr/bin/env python3
"""Validate a DNS records file without running a CDK synth."""

import argparse
import json
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from site_infra.dns_records import DnsRecord, DnsRecordError, load_dns_records  # noqa: E402


def format_table(records: list[DnsRecord], domain_name: str | None) -> str:
  """Format records as aligned text, '@' marking the zone apex."""
  rows = []
  for record in records:
    name = record.record_name_for(domain_name) if domain_name else record.name
    rows.append((record.type, name or "@", ", ".join(record.values)))

  type_width = max((len(r[0]) for r in rows), default=4)
  name_width = max((len(r[1]) for r in rows), default=4)
  return "\n".join(
    f"{rtype:<{type_width}}  {name:<{name_width}}  {values}" for rtype, name, values in rows
  )


def format_json(records: list[DnsRecord], domain_name: str | None) -> str:
  return json.dumps(
    [
      {
        "type": record.type,
        "name": record.record_name_for(domain_name) if domain_name else record.name,
        "values": record.values,
      }
      for record in records
    ],
    indent=2,
  )


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(description="Validate a DNS records configuration file")
  parser.add_argument(
    "path",
    nargs="?",
    default="configuration/dns-records.json",
    help="Path to the records file (default: configuration/dns-records.json)",
  )
  parser.add_argument(
    "--domain",
    help="Domain name; records with this exact name are shown as the apex",
  )
  parser.add_argument(
    "--format",
    choices=["table", "json"],
    default="table",
    help="Output format (default: table)",
  )

  args = parser.parse_args()

  try:
    records = load_dns_records(args.path)
  except DnsRecordError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(format_json(records, args.domain))
  else:
    print(format_table(records, args.domain))
    print(f"\n{len(records)} record(s) OK", file=sys.stderr)


if __name__ == "__main__":
  main()
