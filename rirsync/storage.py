"""Storage that writes parsed objects into one JSON file per object kind."""

from __future__ import annotations

import json
import os
from types import TracebackType
from typing import Any, TextIO

from .folder import Folder
from .models import ASN, Domain, InetNum, Organization, Person, Route, Route6, to_json_dict

BUFFER_SIZE = 5 * 1024 * 1024

KINDS = ("asns", "inetnums", "routes", "routes6", "persons", "organizations", "domains")

_HTML_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    0x2028: "\\u2028",
    0x2029: "\\u2029",
}


def _marshal(value: Any) -> str:
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return text.translate(_HTML_ESCAPES)


class JsonStorage:
    """Writes each kind of object as a JSON object keyed by its primary attribute.

    The files are ``<kind>.json`` inside the folder and are complete once
    :meth:`close` has been called.
    """

    def __init__(self, folder: Folder) -> None:
        self._folder = folder
        self._files: dict[str, TextIO] = {}
        self._counts: dict[str, int] = {}
        self._closed = False
        try:
            for kind in KINDS:
                self._open(kind)
        except OSError:
            for handle in self._files.values():
                handle.close()
            self._files.clear()
            self._closed = True
            raise

    def _open(self, kind: str) -> None:
        filename = os.path.join(self._folder.path, f"{kind}.json")
        handle = open(filename, "w", encoding="utf-8", newline="\n", buffering=BUFFER_SIZE)
        try:
            handle.write("{\n")
        except OSError:
            handle.close()
            raise
        self._files[kind] = handle
        self._counts[kind] = 0

    def _save(self, kind: str, key: str, obj: Any) -> None:
        if self._closed:
            raise ValueError("storage is closed")
        handle = self._files.get(kind)
        if handle is None:
            raise ValueError(f"writer for {kind} not initialized")
        separator = ",\n" if self._counts[kind] else ""
        handle.write(f"{separator}  {_marshal(key)}: {_marshal(to_json_dict(obj))}")
        self._counts[kind] += 1

    def save_asn(self, asn: ASN) -> None:
        """Store an aut-num object under its AS number."""
        self._save("asns", asn.as_number, asn)

    def save_inetnum(self, inetnum: InetNum) -> None:
        """Store an inetnum object under its address range."""
        self._save("inetnums", inetnum.ip_range, inetnum)

    def save_route(self, route: Route) -> None:
        """Store a route object under its prefix."""
        self._save("routes", route.prefix, route)

    def save_route6(self, route6: Route6) -> None:
        """Store a route6 object under its prefix."""
        self._save("routes6", route6.prefix, route6)

    def save_person(self, person: Person) -> None:
        """Store a person object under its NIC handle."""
        self._save("persons", person.nic_hdl, person)

    def save_organization(self, org: Organization) -> None:
        """Store an organisation object under its organisation id."""
        self._save("organizations", org.org_id, org)

    def save_domain(self, domain: Domain) -> None:
        """Store a domain object under its domain name."""
        self._save("domains", domain.domain, domain)

    def close(self) -> None:
        """Finish and close every file; raises the last error met, if any."""
        if self._closed:
            return
        self._closed = True
        last_error: OSError | None = None
        for handle in self._files.values():
            try:
                handle.write("\n}\n")
                handle.flush()
            except OSError as err:
                last_error = err
            finally:
                try:
                    handle.close()
                except OSError as err:
                    last_error = err
        self._files.clear()
        if last_error is not None:
            raise last_error

    def __enter__(self) -> JsonStorage:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()