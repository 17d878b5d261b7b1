"""Game Boy hardware parts: timer, work RAM, LCD registers, colour RAM, sprites and PPU value types."""