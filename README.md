# doglookup

A library for decoding pieces of DNS wire-format data: domain names
(including compressed names), the packet header flags, and a set of resource
record types.

## Installation

```
pip install doglookup
```

## Reading from a buffer

`doglookup.reader.Reader` is a cursor over a byte buffer. It reads big-endian
integers with `read_u8`, `read_u16` and `read_u32`, and byte strings with
`read_exact`. Its `position` can be moved freely, and reading past the end of
the data raises `TruncatedDataError`.

## Domain names

`doglookup.labels.Labels` holds a name as length-prefixed labels:

```python
from doglookup.labels import Labels, read_labels
from doglookup.reader import Reader

name = Labels.encode("dns.lookup.dog")
str(name)        # "dns.lookup.dog."
len(name)        # 3
name.to_bytes()  # b"\x03dns\x06lookup\x03dog\x00"

parsed, consumed = read_labels(Reader(name.to_bytes()))
```

`Labels.encode` lower-cases ASCII labels and IDNA-encodes the others. It
raises `LabelEncodingError` (a `ValueError`) when a label cannot be encoded
or is longer than 255 bytes. `Labels.root()` is the empty name, and
`extend` joins two names.

`read_labels` follows compression pointers. It returns the name and the
number of bytes taken up at the starting position, pointer bytes included.
A pointer loop, or eight pointers in a row, raises `TooMuchRecursionError`.

## Header flags

`doglookup.flags` has `Flags`, `Opcode`, `ErrorCode` and `QClass`:

```python
from doglookup.flags import ErrorCode, Flags, QClass

flags = Flags.from_u16(0x8183)
flags.response, flags.recursion_desired   # True, True
flags.error_code == ErrorCode.NX_DOMAIN    # True

Flags.query().to_u16()                     # 0x0100
QClass.from_number(1) == QClass.IN         # True
```

`Flags.to_u16` only packs the standard query opcode and raises `ValueError`
for any other; it does not write the response code.

## Resource records

Each record class in `doglookup.records` has a `read` class method that
takes the record's stated length and a `Reader` positioned at the record
data:

| Module                          | Classes            |
|---------------------------------|--------------------|
| `doglookup.records.a`           | `A`                |
| `doglookup.records.eui`         | `EUI48`, `EUI64`   |
| `doglookup.records.loc`         | `LOC`              |
| `doglookup.records.mx`          | `MX`               |
| `doglookup.records.naptr`       | `NAPTR`            |
| `doglookup.records.openpgpkey`  | `OPENPGPKEY`       |
| `doglookup.records.soa`         | `SOA`              |
| `doglookup.records.srv`         | `SRV`              |
| `doglookup.records.sshfp`       | `SSHFP`            |
| `doglookup.records.tlsa`        | `TLSA`             |
| `doglookup.records.txt`         | `TXT`              |

```python
from doglookup.reader import Reader
from doglookup.records.a import A
from doglookup.records.eui import EUI48

A.read(4, Reader(b"\x7f\x00\x00\x01")).address   # IPv4Address('127.0.0.1')
EUI48.read(6, Reader(bytes.fromhex("00005e005301"))).formatted_address()
# "00-00-5e-00-53-01"
```

Some records have helpers for display: `SSHFP.hex_fingerprint`,
`TLSA.hex_certificate_data` and `OPENPGPKEY.base64_key`. `LOC` decodes its
fields into `Size`, `Position` and `Altitude`, each with a readable `str`
such as `51°30′12.748″ N` or `405050.50m`; a latitude or longitude out of
range is `None`.

The EDNS(0) pseudo-record `doglookup.records.opt.OPT` is read with
`OPT.read(reader)`, with no stated length, and can be written back with
`to_bytes`.

## Errors

Malformed data raises a subclass of `doglookup.errors.WireError`:

- `TruncatedDataError`: the data ended too early
- `WrongRecordLengthError`: the stated length breaks the type's rule, given
  as a `MandatedLength`
- `WrongLabelLengthError`: the bytes read differ from the stated length
- `TooMuchRecursionError`: compression pointers loop or go too deep
- `WrongVersionError`: a `LOC` record has a version other than 0

## What it does not do

The package decodes the parts listed above and nothing more. It does not
build request packets or parse whole response packets with their query and
answer sections, it has no lookup from record type names or numbers to
record classes, it does not decode AAAA, CNAME, NS, PTR, CAA, HINFO or URI
records, and it does not send anything over the network.

## Running the tests

```
pip install -e ".[test]"
pytest
```