"""Tests for the DNS record configuration loader."""

import json
from pathlib import Path

import pytest
from aws_cdk import aws_route53 as route53

from site_infra.dns_records import (
  SUPPORTED_RECORD_TYPES,
  DnsRecord,
  DnsRecordError,
  load_dns_records,
  parse_dns_records,
)


class TestDnsRecord:
  """Test the DnsRecord dataclass."""

  def test_apex_name_is_omitted(self) -> None:
    """A name equal to the domain maps to the zone apex."""
    record = DnsRecord(type="TXT", name="example.com", values=("hello",))

    assert record.record_name_for("example.com") is None

  def test_other_names_are_kept_verbatim(self) -> None:
    """Other names are used unchanged, without trailing-dot handling."""
    assert DnsRecord(type="CNAME", name="mail", values=("x",)).record_name_for(
      "example.com"
    ) == "mail"
    assert DnsRecord(type="TXT", name="example.com.", values=("x",)).record_name_for(
      "example.com"
    ) == "example.com."
    assert DnsRecord(type="TXT", name="Example.com", values=("x",)).record_name_for(
      "example.com"
    ) == "Example.com"

  def test_record_type_maps_to_route53_enum(self) -> None:
    """The type string resolves to the route53 RecordType member."""
    assert DnsRecord(type="MX", name="a", values=("x",)).record_type == route53.RecordType.MX

  def test_supported_types_cover_common_kinds(self) -> None:
    """The supported enumeration includes the usual record kinds."""
    for kind in ("A", "AAAA", "CNAME", "MX", "TXT", "NS", "SRV", "CAA"):
      assert kind in SUPPORTED_RECORD_TYPES


class TestParseDnsRecords:
  """Test parse_dns_records validation."""

  def test_parses_valid_records(self) -> None:
    """Valid declarations become DnsRecord objects in order."""
    records = parse_dns_records(
      {
        "records": [
          {"type": "TXT", "name": "example.com", "values": ["v=spf1 -all"]},
          {"type": "MX", "name": "example.com", "values": ["10 mail.example.com"]},
        ]
      }
    )

    assert records == [
      DnsRecord(type="TXT", name="example.com", values=("v=spf1 -all",)),
      DnsRecord(type="MX", name="example.com", values=("10 mail.example.com",)),
    ]

  def test_empty_records_list(self) -> None:
    """An empty list is valid and yields no records."""
    assert parse_dns_records({"records": []}) == []

  @pytest.mark.parametrize(
    "data",
    [{}, {"records": None}, {"records": {"type": "A"}}, {"records": "A"}, [], None],
  )
  def test_missing_or_invalid_records_array(self, data: object) -> None:
    """The top-level records array is required."""
    with pytest.raises(DnsRecordError, match='missing or invalid "records" array'):
      parse_dns_records(data)

  def test_missing_type(self) -> None:
    """A declaration without a type is rejected and named."""
    with pytest.raises(DnsRecordError, match='missing "type"') as exc_info:
      parse_dns_records({"records": [{"name": "no-type", "values": ["x"]}]})

    assert "no-type" in str(exc_info.value)

  def test_missing_name(self) -> None:
    """A declaration without a name is rejected."""
    with pytest.raises(DnsRecordError, match='missing "name"'):
      parse_dns_records({"records": [{"type": "A", "values": ["1.2.3.4"]}]})

  def test_empty_name(self) -> None:
    """An empty name counts as missing."""
    with pytest.raises(DnsRecordError, match='missing "name"'):
      parse_dns_records({"records": [{"type": "A", "name": "", "values": ["1.2.3.4"]}]})

  def test_unknown_type(self) -> None:
    """Types outside the supported enumeration are rejected."""
    with pytest.raises(DnsRecordError, match='Invalid "type"') as exc_info:
      parse_dns_records({"records": [{"type": "BOGUS", "name": "x", "values": ["y"]}]})

    assert "BOGUS" in str(exc_info.value)

  def test_lowercase_type_is_rejected(self) -> None:
    """Type names are matched exactly."""
    with pytest.raises(DnsRecordError, match='Invalid "type"'):
      parse_dns_records({"records": [{"type": "txt", "name": "x", "values": ["y"]}]})

  @pytest.mark.parametrize("values", [None, [], "1.2.3.4", [1, 2]])
  def test_invalid_values(self, values: object) -> None:
    """Values must be a non-empty list of strings."""
    declaration: dict[str, object] = {"type": "A", "name": "x"}
    if values is not None:
      declaration["values"] = values

    with pytest.raises(DnsRecordError, match='Invalid "values"'):
      parse_dns_records({"records": [declaration]})

  def test_invalid_record_after_valid_ones_fails_whole_file(self) -> None:
    """One bad declaration anywhere fails the whole load."""
    with pytest.raises(DnsRecordError, match="BAD"):
      parse_dns_records(
        {
          "records": [
            {"type": "A", "name": "one", "values": ["1.1.1.1"]},
            {"type": "A", "name": "two", "values": ["2.2.2.2"]},
            {"type": "BAD", "name": "three", "values": ["3.3.3.3"]},
          ]
        }
      )


class TestLoadDnsRecords:
  """Test load_dns_records file handling."""

  def test_load_from_file(self, tmp_path: Path) -> None:
    """Records are read from a JSON file."""
    path = tmp_path / "dns-records.json"
    path.write_text(
      json.dumps({"records": [{"type": "CNAME", "name": "www2", "values": ["example.com"]}]})
    )

    records = load_dns_records(path)

    assert records == [DnsRecord(type="CNAME", name="www2", values=("example.com",))]

  def test_missing_file(self, tmp_path: Path) -> None:
    """A missing file raises DnsRecordError naming the path."""
    path = tmp_path / "missing.json"

    with pytest.raises(DnsRecordError, match="not found"):
      load_dns_records(path)

  def test_invalid_json(self, tmp_path: Path) -> None:
    """Malformed JSON raises DnsRecordError."""
    path = tmp_path / "dns-records.json"
    path.write_text("{records: [")

    with pytest.raises(DnsRecordError, match="not valid JSON"):
      load_dns_records(path)

  def test_bundled_configuration_is_valid(self) -> None:
    """The repository's own records file loads."""
    path = Path(__file__).parent.parent.parent / "configuration" / "dns-records.json"

    records = load_dns_records(path)

    assert [r.type for r in records] == ["TXT", "MX"]

  def test_invalid_utf8(self, tmp_path: Path) -> None:
    """Bytes that are not UTF-8 raise DnsRecordError naming the path."""
    path = tmp_path / "dns-records.json"
    path.write_bytes(b'{"records": [{"type": "TXT", "name": "\xff", "values": ["x"]}]}')

    with pytest.raises(DnsRecordError, match="not valid UTF-8") as exc_info:
      load_dns_records(path)

    assert str(path) in str(exc_info.value)

  def test_directory_instead_of_file(self, tmp_path: Path) -> None:
    """An unreadable path raises DnsRecordError instead of an OSError."""
    with pytest.raises(DnsRecordError, match="could not be read"):
      load_dns_records(tmp_path)


class TestDnsRecordHashing:
  """Test that parsed records behave as value objects."""

  def test_records_are_hashable(self) -> None:
    """Parsed records can be hashed and deduplicated."""
    records = parse_dns_records(
      {
        "records": [
          {"type": "A", "name": "app", "values": ["192.0.2.1"]},
          {"type": "A", "name": "app", "values": ["192.0.2.1"]},
        ]
      }
    )

    assert len(set(records)) == 1
    assert records[0].values == ("192.0.2.1",)
