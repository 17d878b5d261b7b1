"""SM83 CPU pieces: registers, flags, interrupts, CPU state and instruction representation."""