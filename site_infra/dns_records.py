"""DNS record declarations loaded from a JSON configuration file.

The file is expected to look like::

  {
    "records": [
      {"type": "TXT", "name": "example.com", "values": ["v=spf1 -all"]},
      {"type": "CNAME", "name": "mail", "values": ["mail.provider.net"]}
    ]
  }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from aws_cdk import aws_route53 as route53

SUPPORTED_RECORD_TYPES: frozenset[str] = frozenset(route53.RecordType.__members__)


class DnsRecordError(ValueError):
  """Raised when the DNS record configuration is malformed."""


@dataclass(frozen=True)
class DnsRecord:
  """A single record declaration from the configuration file."""

  type: str
  name: str
  values: tuple[str, ...] = ()

  @property
  def record_type(self) -> route53.RecordType:
    return route53.RecordType[self.type]

  def record_name_for(self, domain_name: str) -> str | None:
    """Return the record name to declare, or None for the zone apex."""
    return None if self.name == domain_name else self.name


def _describe(declaration: Any) -> str:
  return json.dumps(declaration, default=str)


def _validate(declaration: Any) -> None:
  if not isinstance(declaration, dict):
    raise DnsRecordError(f"Invalid DNS record, expected an object: {_describe(declaration)}")
  if not declaration.get("type"):
    raise DnsRecordError(f'Invalid DNS record missing "type": {_describe(declaration)}')
  if not declaration.get("name"):
    raise DnsRecordError(f'Invalid DNS record missing "name": {_describe(declaration)}')
  if not isinstance(declaration["name"], str):
    raise DnsRecordError(f'Invalid "name" for DNS record: {_describe(declaration)}')
  record_type = declaration["type"]
  if not isinstance(record_type, str) or record_type not in SUPPORTED_RECORD_TYPES:
    raise DnsRecordError(f'Invalid "type" for DNS record: {_describe(declaration)}')

  values = declaration.get("values")
  if not isinstance(values, list) or not values or not all(isinstance(v, str) for v in values):
    raise DnsRecordError(
      f'Invalid "values" for DNS record, expected a non-empty list of strings: '
      f"{_describe(declaration)}"
    )


def parse_dns_records(data: Any) -> list[DnsRecord]:
  """Validate every declaration, then build the records.

  Validation covers the whole list before anything is built, so one bad
  declaration means no records at all.

  Raises:
    DnsRecordError: If the structure or any declaration is invalid.
  """
  if not isinstance(data, dict) or not isinstance(data.get("records"), list):
    raise DnsRecordError('Invalid DNS records structure: missing or invalid "records" array')

  declarations: list[Any] = data["records"]
  for declaration in declarations:
    _validate(declaration)

  return [
    DnsRecord(
      type=declaration["type"],
      name=declaration["name"],
      values=tuple(declaration["values"]),
    )
    for declaration in declarations
  ]


def load_dns_records(path: Path | str) -> list[DnsRecord]:
  """Load and validate DNS records from a JSON file."""
  path = Path(path)
  try:
    with open(path, encoding="utf-8") as f:
      data = json.load(f)
  except FileNotFoundError as e:
    raise DnsRecordError(f"DNS records file not found: {path}") from e
  except OSError as e:
    raise DnsRecordError(f"DNS records file could not be read: {path}: {e}") from e
  except json.JSONDecodeError as e:
    raise DnsRecordError(f"DNS records file is not valid JSON: {path}: {e}") from e
  except UnicodeDecodeError as e:
    raise DnsRecordError(f"DNS records file is not valid UTF-8: {path}: {e}") from e

  return parse_dns_records(data)
