"""Whois database objects and their JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _text(json_name: str) -> Any:
    return field(default="", metadata={"json": json_name})


def _texts(json_name: str) -> Any:
    return field(default_factory=list, metadata={"json": json_name})


def _time(json_name: str) -> Any:
    return field(default=ZERO_TIME, metadata={"json": json_name})


def _mapping(json_name: str) -> Any:
    return field(default_factory=dict, metadata={"json": json_name})


@dataclass
class BaseObject:
    """Attributes shared by every database object."""

    key: str = _text("Key")
    created: datetime = _time("Created")
    last_modified: datetime = _time("LastModified")
    source: str = _text("Source")
    admin_c: str = _text("AdminC")
    tech_c: str = _text("TechC")
    mnt_by: list[str] = _texts("MntBy")


@dataclass
class ASN(BaseObject):
    """An autonomous system number object."""

    as_number: str = _text("ASNumber")
    as_name: str = _text("ASName")
    description: list[str] = _texts("Description")
    org: str = _text("Org")
    status: str = _text("Status")
    notify: str = _text("Notify")


@dataclass
class InetNum(BaseObject):
    """An IPv4 address range object."""

    ip_range: str = _text("IPRange")
    net_name: str = _text("NetName")
    description: list[str] = _texts("Description")
    country: str = _text("Country")
    status: str = _text("Status")
    org: str = _text("Org")


@dataclass
class Route(BaseObject):
    """An IPv4 route object."""

    prefix: str = _text("Prefix")
    description: str = _text("Description")
    origin: str = _text("Origin")
    org: str = _text("Org")


@dataclass
class Route6(BaseObject):
    """An IPv6 route object."""

    prefix: str = _text("Prefix")
    description: str = _text("Description")
    origin: str = _text("Origin")
    org: str = _text("Org")


@dataclass
class Person(BaseObject):
    """A person object."""

    name: str = _text("Name")
    address: list[str] = _texts("Address")
    phone: str = _text("Phone")
    email: str = _text("Email")
    nic_hdl: str = _text("NicHdl")


@dataclass
class Organization(BaseObject):
    """An organisation object."""

    name: str = _text("Name")
    type: str = _text("Type")
    address: list[str] = _texts("Address")
    email: str = _text("Email")
    abuse_c: str = _text("AbuseC")
    org_id: str = _text("OrgID")


@dataclass
class Domain(BaseObject):
    """A reverse-delegation domain object."""

    domain: str = _text("Domain")
    description: str = _text("Description")
    nameservers: list[str] = _texts("Nameservers")
    zone_c: str = _text("ZoneC")


@dataclass
class RipeDatabase:
    """A whole database, each kind of object keyed by its primary attribute."""

    asns: dict[str, ASN] = _mapping("ASNs")
    inetnums: dict[str, InetNum] = _mapping("InetNums")
    routes: dict[str, Route] = _mapping("Routes")
    routes6: dict[str, Route6] = _mapping("Routes6")
    persons: dict[str, Person] = _mapping("Persons")
    organizations: dict[str, Organization] = _mapping("Organizations")
    domains: dict[str, Domain] = _mapping("Domains")


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _encode(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, dict):
        return {str(k): _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def to_json_dict(obj: Any) -> dict[str, Any]:
    """Return a JSON-ready dict of a model, with the exported attribute names."""
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a model instance, got {type(obj).__name__}")
    return {
        f.metadata.get("json", f.name): _encode(getattr(obj, f.name))
        for f in fields(obj)
    }