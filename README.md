# hexblock

Building blocks for hex editing tools, in plain Python with no runtime
dependencies.

## Modules

- `hexblock.vector`
  - `Vector` is a growable container that keeps track of an explicit capacity.
    The capacity is rounded up to a multiple of `grow_by`. It has `add`,
    `extend`, `insert`, `insert_items`, `remove`, `replace`, `resize`,
    `reserve`, `clear` and `capacity`.
  - `SimpleArray` adds operations that check their bounds first:
    `insert_at_grow`, `insert_items_at_grow`, `remove_at`, `adopt` and
    `replace_range`. They raise `IndexError` or `ValueError` on a bad range.
  - `SimpleString` is a small mutable string. It supports `append`, `set`,
    `is_empty`, and `+` / `+=` with `str` and with other `SimpleString`s.
    Text is cut at the first NUL character.
- `hexblock.template`
  - `TemplateApplier` reads a plain-text template of `type name` pairs and
    describes the bytes they cover, starting at a given offset.
  - The types are `BYTE`/`char`, `WORD`/`short`, `DWORD`/`int`/`long`/`LONG`,
    `float` and `double`. Multi-byte values are read in `Endian.LITTLE` or
    `Endian.BIG` order.
  - Template errors appear in the result text, and the text stops there. The
    errors are an unknown type, a missing name and not enough data.
  - The helpers `skip_whitespace` and `read_token` are also public.
- `hexblock.memory_block`
  - `MemoryBlock` is a sized byte buffer with optional zeroed padding.
  - `create_aligned` rounds the size up to a multiple of the alignment.
  - Sizes are limited to 4 GB - 1.
- `hexblock.partition`
  - `DiskGeometry`, `LayoutEntry` and `PartitionInfo` describe drives and
    partitions.
  - `whole_drive_info` and `partitions_from_layout` build `PartitionInfo`
    entries from geometry and layout values that you supply.
  - `format_size` and `PartitionInfo.size_as_string` give sizes such as
    `"1.50 GB"`.
  - `PartitionInfo.name_as_string` gives labels such as
    `"Drive 1, Partition 2 (1.50 GB)"`.
- `hexblock.block_ops`
  - `EditorState` holds the data, the caret, the selection and an undo list.
  - `plan_move_copy` checks a move or copy request and returns a
    `MoveCopyPlan` with the inclusive block and its target. It does not change
    the data. The target is given as a `TargetMode` and the action as an
    `Operation`.
  - `reverse_range` reverses bytes in place. It mirrors the selection or the
    caret.
  - `select_block` clamps both offsets into the data and selects between them.
  - Bad requests raise `EditError`. A move onto its own position raises
    `NotMovedError`.
- `hexblock.insert_ops`
  - `paste` inserts or overwrites a payload several times, with skip bytes
    between the copies. When there is a selection, the pasted bytes replace it.
  - `bookmark_labels` and `remove_bookmark` work on lists of `Bookmark`.
  - `open_partially` reads a range of a file, or its last bytes, into a
    `PartialFile`.

## Example

```python
from hexblock.template import TemplateApplier, Endian

applier = TemplateApplier(bytes([0x01, 0x00, 0x02, 0x00, 0x00, 0x00]))
applier.set_original_filename("sample.bin")
applier.load_template_text("WORD kind\nDWORD count\n")
applier.create_template_array(0)
applier.apply_template(Endian.LITTLE, 0)
print(applier.result())
```

## What it does not do

- This is a library only. It has no command-line program and no editor
  window.
- The partition helpers never open or query real drives. They work only on
  the geometry and layout values passed to them.
- Move and copy requests are validated and planned, but no function here
  carries them out on the data.

## Tests

```
pip install -e .[test]
pytest
```