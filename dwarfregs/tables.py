"""
DWARF register number tables.

One tuple per architecture, in declaration order. Each entry is
Register(symbol, number, name) where ``name`` is the display string tooling
expects, reproduced exactly (case and punctuation included).
"""

from .registers import Register


# =============================================================================
# ARM
# DWARF for the ARM Architecture (IHI 0040B)
# =============================================================================

# TODO: extend past the core registers (S0-S31, D0-D31 at 64-95 and 256-287).
ARM_REGISTERS = (
    Register("R0", 0, "R0"),
    Register("R1", 1, "R1"),
    Register("R2", 2, "R2"),
    Register("R3", 3, "R3"),
    Register("R4", 4, "R4"),
    Register("R5", 5, "R5"),
    Register("R6", 6, "R6"),
    Register("R7", 7, "R7"),
    Register("R8", 8, "R8"),
    Register("R9", 9, "R9"),
    Register("R10", 10, "R10"),
    Register("R11", 11, "R11"),
    Register("R12", 12, "R12"),
    Register("R13", 13, "R13"),
    Register("R14", 14, "R14"),
    Register("R15", 15, "R15"),
)


# =============================================================================
# Intel i386
# Intel386 psABI version 1.1
# =============================================================================

X86_REGISTERS = (
    Register("EAX", 0, "eax"),
    Register("ECX", 1, "ecx"),
    Register("EDX", 2, "edx"),
    Register("EBX", 3, "ebx"),
    Register("ESP", 4, "esp"),
    Register("EBP", 5, "ebp"),
    Register("ESI", 6, "esi"),
    Register("EDI", 7, "edi"),

    # Return address column (CFA-relative slot, not a physical register)
    Register("RA", 8, "RA"),

    Register("ST0", 11, "st0"),
    Register("ST1", 12, "st1"),
    Register("ST2", 13, "st2"),
    Register("ST3", 14, "st3"),
    Register("ST4", 15, "st4"),
    Register("ST5", 16, "st5"),
    Register("ST6", 17, "st6"),
    Register("ST7", 18, "st7"),

    Register("XMM0", 21, "xmm0"),
    Register("XMM1", 22, "xmm1"),
    Register("XMM2", 23, "xmm2"),
    Register("XMM3", 24, "xmm3"),
    Register("XMM4", 25, "xmm4"),
    Register("XMM5", 26, "xmm5"),
    Register("XMM6", 27, "xmm6"),
    Register("XMM7", 28, "xmm7"),

    Register("MM0", 29, "mm0"),
    Register("MM1", 30, "mm1"),
    Register("MM2", 31, "mm2"),
    Register("MM3", 32, "mm3"),
    Register("MM4", 33, "mm4"),
    Register("MM5", 34, "mm5"),
    Register("MM6", 35, "mm6"),
    Register("MM7", 36, "mm7"),

    Register("MXCSR", 39, "mxcsr"),

    Register("ES", 40, "es"),
    Register("CS", 41, "cs"),
    Register("SS", 42, "ss"),
    Register("DS", 43, "ds"),
    Register("FS", 44, "fs"),
    Register("GS", 45, "gs"),

    Register("TR", 48, "tr"),
    Register("LDTR", 49, "ldtr"),

    Register("FS_BASE", 93, "fs.base"),
    Register("GS_BASE", 94, "gs.base"),
)


# =============================================================================
# AMD64
# x86-64 psABI version 1.0
# =============================================================================

X86_64_REGISTERS = (
    Register("RAX", 0, "rax"),
    Register("RDX", 1, "rdx"),
    Register("RCX", 2, "rcx"),
    Register("RBX", 3, "rbx"),
    Register("RSI", 4, "rsi"),
    Register("RDI", 5, "rdi"),
    Register("RBP", 6, "rbp"),
    Register("RSP", 7, "rsp"),

    Register("R8", 8, "r8"),
    Register("R9", 9, "r9"),
    Register("R10", 10, "r10"),
    Register("R11", 11, "r11"),
    Register("R12", 12, "r12"),
    Register("R13", 13, "r13"),
    Register("R14", 14, "r14"),
    Register("R15", 15, "r15"),

    # Return address column (CFA-relative slot, not a physical register)
    Register("RA", 16, "RA"),

    Register("XMM0", 17, "xmm0"),
    Register("XMM1", 18, "xmm1"),
    Register("XMM2", 19, "xmm2"),
    Register("XMM3", 20, "xmm3"),
    Register("XMM4", 21, "xmm4"),
    Register("XMM5", 22, "xmm5"),
    Register("XMM6", 23, "xmm6"),
    Register("XMM7", 24, "xmm7"),

    Register("XMM8", 25, "xmm8"),
    Register("XMM9", 26, "xmm9"),
    Register("XMM10", 27, "xmm10"),
    Register("XMM11", 28, "xmm11"),
    Register("XMM12", 29, "xmm12"),
    Register("XMM13", 30, "xmm13"),
    Register("XMM14", 31, "xmm14"),
    Register("XMM15", 32, "xmm15"),

    Register("ST0", 33, "st0"),
    Register("ST1", 34, "st1"),
    Register("ST2", 35, "st2"),
    Register("ST3", 36, "st3"),
    Register("ST4", 37, "st4"),
    Register("ST5", 38, "st5"),
    Register("ST6", 39, "st6"),
    Register("ST7", 40, "st7"),

    Register("MM0", 41, "mm0"),
    Register("MM1", 42, "mm1"),
    Register("MM2", 43, "mm2"),
    Register("MM3", 44, "mm3"),
    Register("MM4", 45, "mm4"),
    Register("MM5", 46, "mm5"),
    Register("MM6", 47, "mm6"),
    Register("MM7", 48, "mm7"),

    Register("RFLAGS", 49, "rFLAGS"),
    Register("ES", 50, "es"),
    Register("CS", 51, "cs"),
    Register("SS", 52, "ss"),
    Register("DS", 53, "ds"),
    Register("FS", 54, "fs"),
    Register("GS", 55, "gs"),

    Register("FS_BASE", 58, "fs.base"),
    Register("GS_BASE", 59, "gs.base"),

    Register("TR", 62, "tr"),
    Register("LDTR", 63, "ldtr"),
    Register("MXCSR", 64, "mxcsr"),
    Register("FCW", 65, "fcw"),
    Register("FSW", 66, "fsw"),

    Register("XMM16", 67, "xmm16"),
    Register("XMM17", 68, "xmm17"),
    Register("XMM18", 69, "xmm18"),
    Register("XMM19", 70, "xmm19"),
    Register("XMM20", 71, "xmm20"),
    Register("XMM21", 72, "xmm21"),
    Register("XMM22", 73, "xmm22"),
    Register("XMM23", 74, "xmm23"),
    Register("XMM24", 75, "xmm24"),
    Register("XMM25", 76, "xmm25"),
    Register("XMM26", 77, "xmm26"),
    Register("XMM27", 78, "xmm27"),
    Register("XMM28", 79, "xmm28"),
    Register("XMM29", 80, "xmm29"),
    Register("XMM30", 81, "xmm30"),
    Register("XMM31", 82, "xmm31"),

    Register("K0", 118, "k0"),
    Register("K1", 119, "k1"),
    Register("K2", 120, "k2"),
    Register("K3", 121, "k3"),
    Register("K4", 122, "k4"),
    Register("K5", 123, "k5"),
    Register("K6", 124, "k6"),
    Register("K7", 125, "k7"),
)


# =============================================================================
# RV64
# RISC-V ELF psABI, DWARF register numbers
# =============================================================================

RISCV64_REGISTERS = (
    # Integer registers, displayed as "xN/abi"
    Register("X0", 0, "x0/zero"),
    Register("X1", 1, "x1/ra"),
    Register("X2", 2, "x2/sp"),
    Register("X3", 3, "x3/gp"),
    Register("X4", 4, "x4/tp"),
    Register("X5", 5, "x5/t0"),
    Register("X6", 6, "x6/t1"),
    Register("X7", 7, "x7/t2"),
    Register("X8", 8, "x8/s0"),
    Register("X9", 9, "x9/s1"),
    Register("X10", 10, "x10/a0"),
    Register("X11", 11, "x11/a1"),
    Register("X12", 12, "x12/a2"),
    Register("X13", 13, "x13/a3"),
    Register("X14", 14, "x14/a4"),
    Register("X15", 15, "x15/a5"),
    Register("X16", 16, "x16/a6"),
    Register("X17", 17, "x17/a7"),
    Register("X18", 18, "x18/s2"),
    Register("X19", 19, "x19/s3"),
    Register("X20", 20, "x20/s4"),
    Register("X21", 21, "x21/s5"),
    Register("X22", 22, "x22/s6"),
    Register("X23", 23, "x23/s7"),
    Register("X24", 24, "x24/s8"),
    Register("X25", 25, "x25/s9"),
    Register("X26", 26, "x26/s10"),
    Register("X27", 27, "x27/s11"),
    Register("X28", 28, "x28/t3"),
    Register("X29", 29, "x29/t4"),
    Register("X30", 30, "x30/t5"),
    Register("X31", 31, "x31/t6"),

    # Floating-point registers
    Register("F0", 32, "f0"),
    Register("F1", 33, "f1"),
    Register("F2", 34, "f2"),
    Register("F3", 35, "f3"),
    Register("F4", 36, "f4"),
    Register("F5", 37, "f5"),
    Register("F6", 38, "f6"),
    Register("F7", 39, "f7"),
    Register("F8", 40, "f8"),
    Register("F9", 41, "f9"),
    Register("F10", 42, "f10"),
    Register("F11", 43, "f11"),
    Register("F12", 44, "f12"),
    Register("F13", 45, "f13"),
    Register("F14", 46, "f14"),
    Register("F15", 47, "f15"),
    Register("F16", 48, "f16"),
    Register("F17", 49, "f17"),
    Register("F18", 50, "f18"),
    Register("F19", 51, "f19"),
    Register("F20", 52, "f20"),
    Register("F21", 53, "f21"),
    Register("F22", 54, "f22"),
    Register("F23", 55, "f23"),
    Register("F24", 56, "f24"),
    Register("F25", 57, "f25"),
    Register("F26", 58, "f26"),
    Register("F27", 59, "f27"),
    Register("F28", 60, "f28"),
    Register("F29", 61, "f29"),
    Register("F30", 62, "f30"),
    Register("F31", 63, "f31"),

    # Vector registers
    Register("V0", 96, "v0"),
    Register("V1", 97, "v1"),
    Register("V2", 98, "v2"),
    Register("V3", 99, "v3"),
    Register("V4", 100, "v4"),
    Register("V5", 101, "v5"),
    Register("V6", 102, "v6"),
    Register("V7", 103, "v7"),
    Register("V8", 104, "v8"),
    Register("V9", 105, "v9"),
    Register("V10", 106, "v10"),
    Register("V11", 107, "v11"),
    Register("V12", 108, "v12"),
    Register("V13", 109, "v13"),
    Register("V14", 110, "v14"),
    Register("V15", 111, "v15"),
    Register("V16", 112, "v16"),
    Register("V17", 113, "v17"),
    Register("V18", 114, "v18"),
    Register("V19", 115, "v19"),
    Register("V20", 116, "v20"),
    Register("V21", 117, "v21"),
    Register("V22", 118, "v22"),
    Register("V23", 119, "v23"),
    Register("V24", 120, "v24"),
    Register("V25", 121, "v25"),
    Register("V26", 122, "v26"),
    Register("V27", 123, "v27"),
    Register("V28", 124, "v28"),
    Register("V29", 125, "v29"),
    Register("V30", 126, "v30"),
    Register("V31", 127, "v31"),

    # Control and status registers (4096 + CSR address)
    Register("USTATUS", 4096, "ustatus"),
    Register("UIE", 4100, "uie"),
    Register("UTVEC", 4101, "utvec"),
    Register("USCRATCH", 4160, "uscratch"),
    Register("UEPC", 4161, "uepc"),
    Register("UCAUSE", 4162, "ucause"),
    Register("UTVAL", 4163, "utval"),
    Register("UIP", 4164, "uip"),
    Register("FFLAGS", 4097, "fflags"),
    Register("FRM", 4098, "frm"),
    Register("FCSR", 4099, "fcsr"),
    Register("CYCLE", 7168, "cycle"),
    Register("TIME", 7169, "time"),
    Register("INSTRET", 7170, "instret"),
    Register("HPMCOUNTER3", 7171, "hpmcounter3"),
    Register("HPMCOUNTER4", 7172, "hpmcounter4"),
    Register("HPMCOUNTER5", 7173, "hpmcounter5"),
    Register("HPMCOUNTER6", 7174, "hpmcounter6"),
    Register("HPMCOUNTER7", 7175, "hpmcounter7"),
    Register("HPMCOUNTER8", 7176, "hpmcounter8"),
    Register("HPMCOUNTER9", 7177, "hpmcounter9"),
    Register("HPMCOUNTER10", 7178, "hpmcounter10"),
    Register("HPMCOUNTER11", 7179, "hpmcounter11"),
    Register("HPMCOUNTER12", 7180, "hpmcounter12"),
    Register("HPMCOUNTER13", 7181, "hpmcounter13"),
    Register("HPMCOUNTER14", 7182, "hpmcounter14"),
    Register("HPMCOUNTER15", 7183, "hpmcounter15"),
    Register("HPMCOUNTER16", 7184, "hpmcounter16"),
    Register("HPMCOUNTER17", 7185, "hpmcounter17"),
    Register("HPMCOUNTER18", 7186, "hpmcounter18"),
    Register("HPMCOUNTER19", 7187, "hpmcounter19"),
    Register("HPMCOUNTER20", 7188, "hpmcounter20"),
    Register("HPMCOUNTER21", 7189, "hpmcounter21"),
    Register("HPMCOUNTER22", 7190, "hpmcounter22"),
    Register("HPMCOUNTER23", 7191, "hpmcounter23"),
    Register("HPMCOUNTER24", 7192, "hpmcounter24"),
    Register("HPMCOUNTER25", 7193, "hpmcounter25"),
    Register("HPMCOUNTER26", 7194, "hpmcounter26"),
    Register("HPMCOUNTER27", 7195, "hpmcounter27"),
    Register("HPMCOUNTER28", 7196, "hpmcounter28"),
    Register("HPMCOUNTER29", 7197, "hpmcounter29"),
    Register("HPMCOUNTER30", 7198, "hpmcounter30"),
    Register("HPMCOUNTER31", 7199, "hpmcounter31"),
    Register("SSTATUS", 4352, "sstatus"),
    Register("SEDELEG", 4354, "sedeleg"),
    Register("SIDELEG", 4355, "sideleg"),
    Register("SIE", 4356, "sie"),
    Register("STVEC", 4357, "stvec"),
    Register("SCOUNTEREN", 4358, "scounteren"),
    Register("SSCRATCH", 4416, "sscratch"),
    Register("SEPC", 4417, "sepc"),
    Register("SCAUSE", 4418, "scause"),
    Register("STVAL", 4419, "stval"),
    Register("SIP", 4420, "sip"),
    Register("SATP", 4480, "satp"),
    Register("MVENDORID", 7953, "mvendorid"),
    Register("MARCHID", 7954, "marchid"),
    Register("MIMPID", 7955, "mimpid"),
    Register("MHARTID", 7956, "mhartid"),
    Register("MSTATUS", 4864, "mstatus"),
    Register("MISA", 4865, "misa"),
    Register("MEDELEG", 4866, "medeleg"),
    Register("MIDELEG", 4867, "mideleg"),
    Register("MIE", 4868, "mie"),
    Register("MTVEC", 4869, "mtvec"),
    Register("MCOUNTEREN", 4870, "mcounteren"),
    Register("MSCRATCH", 4928, "mscratch"),
    Register("MEPC", 4929, "mepc"),
    Register("MCAUSE", 4930, "mcause"),
    Register("MTVAL", 4931, "mtval"),
    Register("MIP", 4932, "mip"),
    Register("PMPCFG0", 5024, "pmpcfg0"),
    Register("PMPCFG2", 5026, "pmpcfg2"),
    Register("PMPADDR0", 5040, "pmpaddr0"),
    Register("PMPADDR1", 5041, "pmpaddr1"),
    Register("PMPADDR2", 5042, "pmpaddr2"),
    Register("PMPADDR3", 5043, "pmpaddr3"),
    Register("PMPADDR4", 5044, "pmpaddr4"),
    Register("PMPADDR5", 5045, "pmpaddr5"),
    Register("PMPADDR6", 5046, "pmpaddr6"),
    Register("PMPADDR7", 5047, "pmpaddr7"),
    Register("PMPADDR8", 5048, "pmpaddr8"),
    Register("PMPADDR9", 5049, "pmpaddr9"),
    Register("PMPADDR10", 5050, "pmpaddr10"),
    Register("PMPADDR11", 5051, "pmpaddr11"),
    Register("PMPADDR12", 5052, "pmpaddr12"),
    Register("PMPADDR13", 5053, "pmpaddr13"),
    Register("PMPADDR14", 5054, "pmpaddr14"),
    Register("PMPADDR15", 5055, "pmpaddr15"),
    Register("MCYCLE", 6912, "mcycle"),
    Register("MINSTRET", 6914, "minstret"),
    Register("MHPMCOUNTER3", 6915, "mhpmcounter3"),
    Register("MHPMCOUNTER4", 6916, "mhpmcounter4"),
    Register("MHPMCOUNTER5", 6917, "mhpmcounter5"),
    Register("MHPMCOUNTER6", 6918, "mhpmcounter6"),
    Register("MHPMCOUNTER7", 6919, "mhpmcounter7"),
    Register("MHPMCOUNTER8", 6920, "mhpmcounter8"),
    Register("MHPMCOUNTER9", 6921, "mhpmcounter9"),
    Register("MHPMCOUNTER10", 6922, "mhpmcounter10"),
    Register("MHPMCOUNTER11", 6923, "mhpmcounter11"),
    Register("MHPMCOUNTER12", 6924, "mhpmcounter12"),
    Register("MHPMCOUNTER13", 6925, "mhpmcounter13"),
    Register("MHPMCOUNTER14", 6926, "mhpmcounter14"),
    Register("MHPMCOUNTER15", 6927, "mhpmcounter15"),
    Register("MHPMCOUNTER16", 6928, "mhpmcounter16"),
    Register("MHPMCOUNTER17", 6929, "mhpmcounter17"),
    Register("MHPMCOUNTER18", 6930, "mhpmcounter18"),
    Register("MHPMCOUNTER19", 6931, "mhpmcounter19"),
    Register("MHPMCOUNTER20", 6932, "mhpmcounter20"),
    Register("MHPMCOUNTER21", 6933, "mhpmcounter21"),
    Register("MHPMCOUNTER22", 6934, "mhpmcounter22"),
    Register("MHPMCOUNTER23", 6935, "mhpmcounter23"),
    Register("MHPMCOUNTER24", 6936, "mhpmcounter24"),
    Register("MHPMCOUNTER25", 6937, "mhpmcounter25"),
    Register("MHPMCOUNTER26", 6938, "mhpmcounter26"),
    Register("MHPMCOUNTER27", 6939, "mhpmcounter27"),
    Register("MHPMCOUNTER28", 6940, "mhpmcounter28"),
    Register("MHPMCOUNTER29", 6941, "mhpmcounter29"),
    Register("MHPMCOUNTER30", 6942, "mhpmcounter30"),
    Register("MHPMCOUNTER31", 6943, "mhpmcounter31"),
    Register("MCOUNTINHIBIT", 4896, "mcountinhibit"),
    Register("MHPMEVENT3", 4899, "mhpmevent3"),
    Register("MHPMEVENT4", 4900, "mhpmevent4"),
    Register("MHPMEVENT5", 4901, "mhpmevent5"),
    Register("MHPMEVENT6", 4902, "mhpmevent6"),
    Register("MHPMEVENT7", 4903, "mhpmevent7"),
    Register("MHPMEVENT8", 4904, "mhpmevent8"),
    Register("MHPMEVENT9", 4905, "mhpmevent9"),
    Register("MHPMEVENT10", 4906, "mhpmevent10"),
    Register("MHPMEVENT11", 4907, "mhpmevent11"),
    Register("MHPMEVENT12", 4908, "mhpmevent12"),
    Register("MHPMEVENT13", 4909, "mhpmevent13"),
    Register("MHPMEVENT14", 4910, "mhpmevent14"),
    Register("MHPMEVENT15", 4911, "mhpmevent15"),
    Register("MHPMEVENT16", 4912, "mhpmevent16"),
    Register("MHPMEVENT17", 4913, "mhpmevent17"),
    Register("MHPMEVENT18", 4914, "mhpmevent18"),
    Register("MHPMEVENT19", 4915, "mhpmevent19"),
    Register("MHPMEVENT20", 4916, "mhpmevent20"),
    Register("MHPMEVENT21", 4917, "mhpmevent21"),
    Register("MHPMEVENT22", 4918, "mhpmevent22"),
    Register("MHPMEVENT23", 4919, "mhpmevent23"),
    Register("MHPMEVENT24", 4920, "mhpmevent24"),
    Register("MHPMEVENT25", 4921, "mhpmevent25"),
    Register("MHPMEVENT26", 4922, "mhpmevent26"),
    Register("MHPMEVENT27", 4923, "mhpmevent27"),
    Register("MHPMEVENT28", 4924, "mhpmevent28"),
    Register("MHPMEVENT29", 4925, "mhpmevent29"),
    Register("MHPMEVENT30", 4926, "mhpmevent30"),
    Register("MHPMEVENT31", 4927, "mhpmevent31"),
    Register("TSELECT", 6048, "tselect"),
    Register("TDATA1", 6049, "tdata1"),
    Register("TDATA2", 6050, "tdata2"),
    Register("TDATA3", 6051, "tdata3"),
    Register("DCSR", 6064, "dcsr"),
    Register("DPC", 6065, "dpc"),
    Register("DSCRATCH0", 6066, "dscratch0"),
    Register("DSCRATCH1", 6067, "dscratch1"),
)
