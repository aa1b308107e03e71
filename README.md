# rirsync

rirsync fetches the public whois database dumps published by the five
Regional Internet Registries (AFRINIC, ARIN, LACNIC, RIPE NCC and APNIC),
parses their RPSL objects and writes them out as JSON files, one file per
object kind and registry.

## Installation

```
pip install .
```

## Command line

```
rirsync [--folder PATH]
```

`--folder` sets the working folder; by default it is `rirs` inside the
system temporary directory (`/tmp/rirs` on most Unix systems). Inside it:

- `download/<registry>/` holds the compressed dumps while they are parsed
  and is emptied once a registry is done;
- `database/<registry>/` holds the results: `asns.json`, `inetnums.json`,
  `routes.json`, `routes6.json`, `persons.json`, `organizations.json` and
  `domains.json`;
- `extract/` is created but left empty.

Each result file is a JSON object keyed by the object's primary attribute
(AS number, IP range, route prefix, nic-hdl, organisation id or domain name).
The command exits with status 1 and prints the error to standard error if a
download, a file operation or parsing fails.

## Library use

```python
from rirsync.folder import Folder
from rirsync.parser import Parser
from rirsync.storage import JsonStorage

out = Folder("/tmp/ripe-json")
with JsonStorage(out) as storage:
    Parser(storage).parse_gz_file("ripe.db.gz")
```

`Parser` can also read plain-text dumps with `parse_file`, or lines already
in memory with `parse_lines`. Any object with the `save_asn`,
`save_inetnum`, `save_route`, `save_route6`, `save_person`,
`save_organization` and `save_domain` methods can stand in for
`JsonStorage`. The functions `parse_asn`, `parse_inetnum`, `parse_route`,
`parse_route6`, `parse_person`, `parse_organization`, `parse_domain` and
`split_objects` in `rirsync.parser` are usable on their own, and
`rirsync.models.to_json_dict` gives the JSON form of any model object.

To run a full synchronisation from Python:

```python
from rirsync.folder import Folder
from rirsync.rir import Rir
from rirsync.sources import SOURCES

Rir(Folder("/tmp/rirs"), SOURCES).sync()
```

Leaving out the sources argument syncs every registry in `SOURCES`.

## What it does not do

- Only the object kinds aut-num, inetnum, route, route6, person,
  organisation and domain are kept; all others in a dump are skipped.
- Dumps are fetched over HTTP(S) only; `Source.ftp_databases` is never used.
- Every run downloads everything again and rewrites the JSON files; there is
  no incremental update and no query interface over the results.

## Tests

```
pip install .[test]
pytest
```