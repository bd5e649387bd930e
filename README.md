# mp4scan

`mp4scan` reads the box (atom) structure of an MP4 or QuickTime file and
prints the fields of the header boxes it understands. It uses only the
Python standard library.

## What is decoded

Top-level boxes:

- `ftyp`: major brand, minor version and the list of compatible brands
- `moov`: walked as a container
- `mdat`: listed with its name, offset and size; its payload is not read
- any other known box type (for example `free`): listed like `mdat`

The scan of the top level stops at the end of the data, at a box whose
type code is not known, or after a box whose size is zero.

Inside `moov` and its descendants:

- `moov` holds `mvhd` (version, flags, creation and modification times,
  timescale, duration, current time, next track id, and the duration as a
  `datetime.timedelta`) and `trak`
- `trak` holds `tkhd` (track id, duration, layer, alternate group, volume,
  width, height), `edts` and `mdia`
- `mdia` holds `mdhd`, `elng` and `minf`
- `minf` holds `smhd`, `vmhd`, `hdlr` and `dinf`
- `dinf` holds `dref` (version, flags, number of entries)

Within a container, boxes of any other type are listed with their name,
offset and size only. `edts` and `smhd` are listed the same way.

## Installation

```
pip install .
```

## Command line

```
mp4scan --file movie.mp4
```

(`-f` is the short form of `--file`.) Each box is printed after a line of
dashes, as `name:`, `offset:` and `size:` lines followed by one
`field: value` line per decoded field; the brands of `ftyp` are printed
between `<brands>` and `</brands>`. Nested boxes are indented with one tab
per level. If the file cannot be opened or its data is malformed, a message
is written to standard error and the exit status is 1.

There is also a full-screen terminal view built on `curses`:

```
mp4scan-tui --file movie.mp4
```

It shows the file name and the current time, redrawn about three times a
second, above an empty frame titled "Messages". Press Esc to leave it.

## Library use

```python
import sys

from mp4scan.header import Mp4Header

header = Mp4Header.parse("movie.mp4")
header.print_comp(sys.stdout)

for atom in header.atoms:
    print(atom.base.name, atom.base.offset, atom.base.size)

for line in header.lines():
    ...
```

- `Mp4Header.parse(path)` reads a file; `Mp4Header.parse_stream(stream)`
  reads any seekable binary stream positioned at its start.
- `Mp4Header.atoms` is the list of parsed top-level boxes. Each is a
  dataclass (`Ftyp`, `Moov`, `Mdat`, `Undef`, ...) with a `base` attribute,
  a `mp4scan.base.BaseBox` holding `offset`, `size`, `name` and `depth`.
  Containers have an `atoms` list of their children.
- `lines()` returns the report as a list of strings; `print_comp(out)`
  writes it to `out`, or to standard output by default.
- `mp4scan.boxtype` holds the `BoxType` enumeration, `UnknownBox`, and
  `box_type_from_code`, `box_type_code` and `box_type_name`.
- `mp4scan.binary` holds the big-endian readers (`read_u8` to `read_u64`,
  `read_string`, `read_exact`, `skip`) and the fixed-point helpers
  `fixed_point_u8` and `fixed_point_u16`.

Malformed data raises `mp4scan.binary.ParseError`: a truncated field, a
`mvhd`, `tkhd` or `mdhd` version other than 0 or 1, a `mvhd` timescale of
zero, a 64-bit box size below 16, a box too small for its fixed fields, or a
string that is not valid UTF-8.

## What it does not do

- Only the boxes listed above are decoded. Sample tables (`stbl`), sample
  descriptions, edit lists, fragments (`moof`) and metadata (`udta`,
  `meta`) are listed by name, offset and size only.
- The terminal view does not show the box structure; it displays only the
  file name and the clock.
- Nothing is written back: files are only read.

## Tests

```
pip install ".[test]"
pytest
```