# hotline

Building blocks for the Hotline BBS protocol, the classic TCP protocol for
chat, news and file sharing. The package has these modules:

- `hotline.field`: the `Field` type, `get_field` and the field ID constants
- `hotline.handshake`: the server side of the TRTP handshake
- `hotline.access`: user access bitmaps (`AccessBitmap`) and permission bit numbers
- `hotline.file_types`: extension to type/creator code table and `friendly_name`
- `hotline.files`: file-type guessing, directory size and item counting,
  path encoding and ignore-pattern matching
- `hotline.file_path`: parsing encoded paths (`FilePath`) and `read_path`
- `hotline.file_header`: folder transfer item headers (`FileHeader`, `new_file_header`)
- `hotline.file_name_with_info`: file list entries (`FileNameWithInfo`)
- `hotline.file_resume_data`: transfer resume records (`FileResumeData`, `ForkInfoList`)
- `hotline.flattened_file_object`: flat file headers, fork headers, the
  information fork and `FlattenedFileObject`
- `hotline.news`: threaded news categories and article list encoding
- `hotline.prefs`: client preferences and bookmarks loaded from YAML

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Examples

### Fields

```python
from hotline.field import FIELD_USER_NAME, Field, get_field

field = Field(FIELD_USER_NAME, b"guest")
field.payload()
# b"\x00\x66\x00\x05guest"

get_field(FIELD_USER_NAME, [field]).data   # b"guest"
```

### File paths

Hotline sends paths as a count followed by length-prefixed items.
`encode_file_path` builds that form from a slash-separated string:

```python
from hotline.files import encode_file_path

encode_file_path("foo")
# b"\x00\x01\x00\x00\x03foo"
```

`FilePath.from_bytes` parses the encoded form. `read_path` resolves an encoded
path and a file name against a root directory. Any `..` parts are dropped, so
the result cannot leave the root:

```python
from hotline.file_path import FilePath, read_path

path = FilePath.from_bytes(encode_file_path("Uploads/Drop Box"))
len(path)              # 2
path.is_dropbox()      # True

read_path("/srv/files", None, b"../../../foo")
# "/srv/files/foo"
```

### Handshake

A server calls `handshake` on a connected binary stream. It reads the
client's 12-byte greeting and writes the 8-byte reply `TRTP` followed by a
zero error code. If the greeting does not start with `TRTP`, or the stream
ends early, it raises `HandshakeError`.

### Access bitmaps

```python
from hotline.access import ACCESS_DISCON_USER, AccessBitmap

access = AccessBitmap()
access.set(ACCESS_DISCON_USER)
access.is_set(ACCESS_DISCON_USER)   # True
bytes(access)                       # 8 bytes, most significant bit first
```

### Flattened file objects

`FlattenedFileObject.read_from` reads a file header, an information fork and
a data fork header from a binary stream. `to_bytes` writes them back out.
`transfer_size` gives the number of bytes a download sends from an offset.
`new_flat_file_information_fork` builds an information fork for a file name,
modify time and type and creator codes.

### Threaded news

`NewsCategoryListData15.to_bytes` encodes a bundle or a category (categories
get a fresh random GUID), and `get_news_art_list_data` summarises its
articles in order of article ID. `read_news_category_list_data` and
`read_news_path` decode what a server sends.

### Client preferences

`read_client_prefs` loads a YAML file such as this one:

```yaml
Username: guest
IconID: 414
Tracker: tracker.example.com:5498
EnableBell: false
Bookmarks:
  - Name: Example
    Addr: hotline.example.com:5500
    Login: guest
    Password: password
```

```python
from hotline.prefs import read_client_prefs

prefs = read_client_prefs("client-config.yaml")
prefs.icon_bytes()     # b"\x01\x9e"
```

It raises `OSError` if the file cannot be opened and `ValueError` if it is
empty or malformed.

## What this package does not do

This package holds the protocol's data structures and helpers only. It has
no server that accepts connections, no client that connects, logs in or
exchanges transactions, no terminal user interface, no file transfer
handling, no loading of server configuration and no commands to run.