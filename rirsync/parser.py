"""Parsing of RPSL whois dumps into model objects handed to a storage."""

from __future__ import annotations

import gzip
import re
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime, timezone
from typing import BinaryIO, Protocol

from .models import ASN, BaseObject, Domain, InetNum, Organization, Person, Route, Route6

MAX_LINE_LENGTH = 5 * 1024 * 1024

_TIME_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?Z")


class Storage(Protocol):
    """Receiver of parsed objects."""

    def save_asn(self, asn: ASN) -> None: ...

    def save_inetnum(self, inetnum: InetNum) -> None: ...

    def save_route(self, route: Route) -> None: ...

    def save_route6(self, route6: Route6) -> None: ...

    def save_person(self, person: Person) -> None: ...

    def save_organization(self, org: Organization) -> None: ...

    def save_domain(self, domain: Domain) -> None: ...


def _attributes(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    for line in lines:
        key, sep, value = line.partition(":")
        if sep:
            yield key.strip(), value.strip()


def _parse_time(value: str) -> datetime | None:
    match = _TIME_RE.fullmatch(value)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or ""
    micro = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        return datetime(year, month, day, hour, minute, second, micro, tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_base_object(lines: Iterable[str]) -> BaseObject:
    """Collect the attributes common to every object."""
    base = BaseObject()
    for key, value in _attributes(lines):
        if key == "Key":
            base.key = value
        elif key == "created":
            parsed = _parse_time(value)
            if parsed is not None:
                base.created = parsed
        elif key == "last-modified":
            parsed = _parse_time(value)
            if parsed is not None:
                base.last_modified = parsed
        elif key == "source":
            base.source = value
        elif key == "admin-c":
            base.admin_c = value
        elif key == "tech-c":
            base.tech_c = value
        elif key == "mnt-by":
            base.mnt_by.append(value)
    return base


def _base_values(base: BaseObject) -> dict:
    return {
        "key": base.key,
        "created": base.created,
        "last_modified": base.last_modified,
        "source": base.source,
        "admin_c": base.admin_c,
        "tech_c": base.tech_c,
        "mnt_by": list(base.mnt_by),
    }


def parse_asn(base: BaseObject, lines: Iterable[str]) -> ASN:
    """Build an aut-num object."""
    asn = ASN(**_base_values(base))
    for key, value in _attributes(lines):
        if key == "aut-num":
            asn.as_number = value
        elif key == "as-name":
            asn.as_name = value
        elif key == "descr":
            asn.description.append(value)
        elif key == "org":
            asn.org = value
        elif key == "status":
            asn.status = value
        elif key == "notify":
            asn.notify = value
    return asn


def parse_inetnum(base: BaseObject, lines: Iterable[str]) -> InetNum:
    """Build an inetnum object."""
    inetnum = InetNum(**_base_values(base))
    for key, value in _attributes(lines):
        if key == "inetnum":
            inetnum.ip_range = value
        elif key == "netname":
            inetnum.net_name = value
        elif key == "descr":
            inetnum.description.append(value)
        elif key == "country":
            inetnum.country = value
        elif key == "status":
            inetnum.status = value
        elif key == "org":
            inetnum.org = value
    return inetnum


def _fill_route(route: Route | Route6, prefix_key: str, lines: Iterable[str]) -> None:
    for key, value in _attributes(lines):
        if key == prefix_key:
            route.prefix = value
        elif key == "descr":
            route.description = value
        elif key == "origin":
            route.origin = value
        elif key == "org":
            route.org = value


def parse_route(base: BaseObject, lines: Iterable[str]) -> Route:
    """Build a route object."""
    route = Route(**_base_values(base))
    _fill_route(route, "route", lines)
    return route


def parse_route6(base: BaseObject, lines: Iterable[str]) -> Route6:
    """Build a route6 object."""
    route6 = Route6(**_base_values(base))
    _fill_route(route6, "route6", lines)
    return route6


def parse_person(base: BaseObject, lines: Iterable[str]) -> Person:
    """Build a person object."""
    person = Person(**_base_values(base))
    for key, value in _attributes(lines):
        if key == "person":
            person.name = value
        elif key == "address":
            person.address.append(value)
        elif key == "phone":
            person.phone = value
        elif key == "e-mail":
            person.email = value
        elif key == "nic-hdl":
            person.nic_hdl = value
    return person


def parse_organization(base: BaseObject, lines: Iterable[str]) -> Organization:
    """Build an organisation object."""
    org = Organization(**_base_values(base))
    for key, value in _attributes(lines):
        if key == "organisation":
            org.org_id = value
        elif key == "org-name":
            org.name = value
        elif key == "org-type":
            org.type = value
        elif key == "address":
            org.address.append(value)
        elif key == "e-mail":
            org.email = value
        elif key == "abuse-c":
            org.abuse_c = value
    return org


def parse_domain(base: BaseObject, lines: Iterable[str]) -> Domain:
    """Build a domain object."""
    domain = Domain(**_base_values(base))
    for key, value in _attributes(lines):
        if key == "domain":
            domain.domain = value
        elif key == "descr":
            domain.description = value
        elif key == "nserver":
            domain.nameservers.append(value)
        elif key == "zone-c":
            domain.zone_c = value
    return domain


def split_objects(lines: Iterable[str]) -> Iterator[tuple[str, list[str]]]:
    """Group lines into blank-line separated objects, yielding (type, lines).

    The type is the attribute name of an object's first line, or "" if that
    line holds no colon.
    """
    current: list[str] = []
    current_type = ""
    for line in lines:
        if line == "":
            if current:
                yield current_type, current
                current = []
                current_type = ""
            continue
        if not current:
            key, sep, _ = line.partition(":")
            if sep:
                current_type = key.strip()
        current.append(line)
    if current:
        yield current_type, current


def _read_lines(stream: BinaryIO) -> Iterator[str]:
    for raw in stream:
        line = raw[:-1] if raw.endswith(b"\n") else raw
        if line.endswith(b"\r"):
            line = line[:-1]
        if len(line) > MAX_LINE_LENGTH:
            raise ValueError(f"line longer than {MAX_LINE_LENGTH} bytes")
        yield line.decode("utf-8", errors="replace")


_HANDLERS: dict[str, tuple[Callable[[BaseObject, list[str]], BaseObject], str]] = {
    "aut-num": (parse_asn, "save_asn"),
    "inetnum": (parse_inetnum, "save_inetnum"),
    "route": (parse_route, "save_route"),
    "route6": (parse_route6, "save_route6"),
    "person": (parse_person, "save_person"),
    "organisation": (parse_organization, "save_organization"),
    "domain": (parse_domain, "save_domain"),
}


class Parser:
    """Parses whois dumps and saves the recognised objects to a storage."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def parse_object(self, obj_type: str, lines: list[str]) -> None:
        """Parse one object's lines and save it; unknown types are ignored."""
        handler = _HANDLERS.get(obj_type)
        if handler is None:
            return
        build, save_name = handler
        obj = build(parse_base_object(lines), lines)
        getattr(self._storage, save_name)(obj)

    def parse_lines(self, lines: Iterable[str]) -> None:
        """Parse a stream of text lines holding blank-line separated objects."""
        for obj_type, obj_lines in split_objects(lines):
            self.parse_object(obj_type, obj_lines)

    def parse_file(self, filename: str) -> None:
        """Parse a plain-text dump file."""
        with open(filename, "rb") as handle:
            self.parse_lines(_read_lines(handle))

    def parse_gz_file(self, path: str) -> None:
        """Parse a gzip-compressed dump file."""
        with gzip.open(path, "rb") as handle:
            self.parse_lines(_read_lines(handle))