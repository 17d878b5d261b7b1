# dotmatrix

Building blocks for a Game Boy / Game Boy Color emulator, written in plain Python with no third-party dependencies.

## What is inside

### `dotmatrix.sm83`: CPU state and instruction types

- `bits` provides the masks `BIT_0` … `BIT_7`. It also provides `activate_rightmost_zeros` and `test_add_carry_bit(bit, a, b)`, which tests for a carry out of a given bit.
- `flags` defines:
  - the flag masks `Z`, `N`, `H` and `C`;
  - the `Condition` enum (`NZ`, `Z`, `NC`, `C`, `ALWAYS`);
  - the `Flags` mixin, with `set_flag`, `clear_flag`, `set_flag_to` and `get_flag`.
- `interrupt` defines the `Interrupt` enum (`VBLANK`, `LCD_STAT`, `TIMER`, `SERIAL`, `JOYPAD`), with `jump_addr()` and `flag_bit()`.
- `registers` defines `Reg8` and `Reg16` and the `Registers` file. `Registers.read` and `Registers.write` accept either register kind. Register pairs are big-endian, and the low nibble of `F` always reads as zero.
- `values` defines the operand references:
  - 8-bit: `RegU8`, `MemU8`, `RawU8`, `HighMemRaw` and `HighMemReg`;
  - 16-bit: `RegU16`, `MemU16` and `RawU16`;
  - signed: `Displacement`.

  It also provides `format_memref` to name I/O addresses, and the coercion helpers `as_u8_ref` and `as_u16_ref`.
- `state` defines `CPUState`, which holds the registers, the halt flag and IME/IE/IF. EI takes effect through `tick_ie_delay`. `get_pending_interrupt` returns the enabled request with the lowest bit, which is the highest priority.
- `instruction` defines:
  - the `Op`, `ALUOperation` and `RotShiftOperation` enums;
  - the `Instruction` dataclass, whose `str()` is disassembly text;
  - `Opcode` and `parse_opcode`, which split an opcode byte into its x/z/y/p/q fields;
  - the decode tables `R_TABLE`, `RP_TABLE`, `CC_TABLE`, `ALU_TABLE` and `ROT_TABLE`.

```python
from dotmatrix.sm83.instruction import Instruction, Op, parse_opcode
from dotmatrix.sm83.registers import Reg8, Reg16, Registers
from dotmatrix.sm83.values import RawU8, RegU8

regs = Registers()
regs.write(Reg16.AF, 0x12FF)
assert regs.read(Reg8.F) == 0xF0

print(Instruction(Op.LD_8, (RegU8(Reg8.A), RawU8(0x12))))  # ld a, $12
print(parse_opcode(0x3C))  # Opcode(x=0, z=4, y=7, p=3, q=1)
```

### `dotmatrix.gameboy`: console hardware pieces

- `bits` provides `interleave`, which merges two tile bit-planes into 2-bit colour indices, and `falling_edge`.
- `timer` defines `Timer`, which models the DIV/TIMA/TMA/TAC block.
  - `step()` advances one M-cycle and returns the IF bits to raise.
  - `reset_div()` handles a write to DIV.
  - `div` and `enabled` are read-only properties.
- `work_ram` defines `WorkRam` with two implementations:
  - `DmgWorkRam`, which has two fixed banks;
  - `CgbWorkRam`, which has eight banks. Writing `bank_number` selects the high bank, and bank 0 maps to bank 1.
- `lcdc` defines `Lcdc` (the LCD control register) and `Stat`, an `IntFlag` with the interrupt-enable helpers and `with_lyc_eq_ly`.
- `color_ram` defines `ColorRamController`, the CGB palette RAM. Access goes through `write_spec`/`read_spec` and `write_data`/`read_data`. Writes are blocked in `PPUMode.DRAW`, but the index still auto-increments.
- `sprites` defines `TileAttributes`, `TileData` and `Sprite`. Sprites sort rightmost-first. `sprite_from_oam` builds a `Sprite` from four OAM bytes.
- `ppu_types` defines:
  - the enums `PPUMode`, `FetcherMode`, `GBMode`, `VRAMBank`, `AddressingMode` and `SpriteHeight`, plus `vram_bank_from`;
  - `Pixel`;
  - `DMGPalette`, whose default is four grey shades.

### `dotmatrix.climg`: images in a terminal

- `img_to_colors.to_colors` pairs the rows of an RGBA buffer into `ColorBlock` cells.
- `image_builder.ImageBuilder` turns frames into half-block characters with 24-bit ANSI colour codes. With `ImageBuilderConfig(skip_unchanged=True)` it redraws only the cells that changed since the previous frame.
- `escape_codes` provides `fg`/`bg`, which give 256-colour sequences, and `fg_rgb`/`bg_rgb`, which give true-colour sequences. It also has cursor constants.

```python
from dotmatrix.climg.image_builder import ImageBuilder, ImageBuilderConfig

builder = ImageBuilder(160, 144, ImageBuilderConfig(skip_unchanged=True))
builder.draw_img(rgba_bytes)          # 160 * 144 * 4 bytes
print(builder.build(), end="", flush=True)
```

## What this package does not do

This package is a set of parts, not a running emulator. It does not include:

- instruction fetching or execution: there is no CPU step loop, and no `Instruction` is ever carried out;
- a memory bus or cartridge/ROM loading;
- a scanline renderer or LCD frame buffer;
- audio, joypad input or save states;
- any command-line program. `ImageBuilder` only returns strings, so reading the keyboard and pacing frames are left to the caller.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```