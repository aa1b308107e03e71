"""The regional registries and the database dumps each publishes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Source:
    """A registry and the URLs of its database dumps."""

    name: str
    http_databases: tuple[str, ...] = ()
    ftp_databases: tuple[str, ...] = ()


_APNIC_PARTS = (
    "as-block",
    "as-set",
    "aut-num",
    "domain",
    "filter-set",
    "inet-rtr",
    "inet6num",
    "inetnum",
    "irt",
    "key-cert",
    "limerick",
    "mntner",
    "organisation",
    "peering-set",
    "role",
    "route-set",
    "route",
    "route6",
    "rtr-set",
)

SOURCES: tuple[Source, ...] = (
    Source("afrinic", ("https://ftp.afrinic.net/pub/dbase/afrinic.db.gz",)),
    Source("arin", ("https://ftp.arin.net/pub/rr/arin.db.gz",)),
    Source(
        "lacnic",
        (
            "https://ftp.lacnic.net/lacnic/dbase/lacnic.db.gz",
            "https://ftp.lacnic.net/lacnic/irr/lacnic.db.gz",
        ),
    ),
    Source("ripe", ("https://ftp.ripe.net/ripe/dbase/ripe.db.gz",)),
    Source(
        "apnic",
        tuple(f"https://ftp.apnic.net/apnic/whois/apnic.db.{part}.gz" for part in _APNIC_PARTS),
    ),
)