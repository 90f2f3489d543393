"""6510 opcode values, including the undocumented ones.

Names combine the mnemonic with an addressing-mode suffix:
``n`` implied or accumulator, ``b`` immediate, ``r`` relative,
``z`` zero page, ``zx``/``zy`` zero page indexed, ``a`` absolute,
``ax``/``ay`` absolute indexed, ``ix`` indexed indirect (pre X),
``iy`` indirect indexed (post Y), ``w`` absolute word, ``i`` absolute
indirect. The ``*_ALL`` tuples hold every opcode that shares one behaviour.
"""

BRKn = 0x00
JSRw = 0x20
RTIn = 0x40
RTSn = 0x60
NOPb = 0x80
LDYb = 0xA0
CPYb = 0xC0
CPXb = 0xE0

ORAix = 0x01
ANDix = 0x21
EORix = 0x41
ADCix = 0x61
STAix = 0x81
LDAix = 0xA1
CMPix = 0xC1
SBCix = 0xE1

LDXb = 0xA2

SLOix = 0x03
RLAix = 0x23
SREix = 0x43
RRAix = 0x63
SAXix = 0x83
LAXix = 0xA3
DCPix = 0xC3
ISBix = 0xE3

NOPz = 0x04
BITz = 0x24
STYz = 0x84
LDYz = 0xA4
CPYz = 0xC4
CPXz = 0xE4

ORAz = 0x05
ANDz = 0x25
EORz = 0x45
ADCz = 0x65
STAz = 0x85
LDAz = 0xA5
CMPz = 0xC5
SBCz = 0xE5

ASLz = 0x06
ROLz = 0x26
LSRz = 0x46
RORz = 0x66
STXz = 0x86
LDXz = 0xA6
DECz = 0xC6
INCz = 0xE6

SLOz = 0x07
RLAz = 0x27
SREz = 0x47
RRAz = 0x67
SAXz = 0x87
LAXz = 0xA7
DCPz = 0xC7
ISBz = 0xE7

PHPn = 0x08
PLPn = 0x28
PHAn = 0x48
PLAn = 0x68
DEYn = 0x88
TAYn = 0xA8
INYn = 0xC8
INXn = 0xE8

ORAb = 0x09
ANDb = 0x29
EORb = 0x49
ADCb = 0x69
LDAb = 0xA9
CMPb = 0xC9
SBCb = 0xE9

ASLn = 0x0A
ROLn = 0x2A
LSRn = 0x4A
RORn = 0x6A
TXAn = 0x8A
TAXn = 0xAA
DEXn = 0xCA
NOPn = 0xEA

ANCb = 0x0B
ASRb = 0x4B
ARRb = 0x6B
ANEb = 0x8B
XAAb = 0x8B
LXAb = 0xAB
SBXb = 0xCB

NOPa = 0x0C
BITa = 0x2C
JMPw = 0x4C
JMPi = 0x6C
STYa = 0x8C
LDYa = 0xAC
CPYa = 0xCC
CPXa = 0xEC

ORAa = 0x0D
ANDa = 0x2D
EORa = 0x4D
ADCa = 0x6D
STAa = 0x8D
LDAa = 0xAD
CMPa = 0xCD
SBCa = 0xED

ASLa = 0x0E
ROLa = 0x2E
LSRa = 0x4E
RORa = 0x6E
STXa = 0x8E
LDXa = 0xAE
DECa = 0xCE
INCa = 0xEE

SLOa = 0x0F
RLAa = 0x2F
SREa = 0x4F
RRAa = 0x6F
SAXa = 0x8F
LAXa = 0xAF
DCPa = 0xCF
ISBa = 0xEF

BPLr = 0x10
BMIr = 0x30
BVCr = 0x50
BVSr = 0x70
BCCr = 0x90
BCSr = 0xB0
BNEr = 0xD0
BEQr = 0xF0

ORAiy = 0x11
ANDiy = 0x31
EORiy = 0x51
ADCiy = 0x71
STAiy = 0x91
LDAiy = 0xB1
CMPiy = 0xD1
SBCiy = 0xF1

SLOiy = 0x13
RLAiy = 0x33
SREiy = 0x53
RRAiy = 0x73
SHAiy = 0x93
LAXiy = 0xB3
DCPiy = 0xD3
ISBiy = 0xF3

NOPzx = 0x14
STYzx = 0x94
LDYzx = 0xB4

ORAzx = 0x15
ANDzx = 0x35
EORzx = 0x55
ADCzx = 0x75
STAzx = 0x95
LDAzx = 0xB5
CMPzx = 0xD5
SBCzx = 0xF5

ASLzx = 0x16
ROLzx = 0x36
LSRzx = 0x56
RORzx = 0x76
STXzy = 0x96
LDXzy = 0xB6
DECzx = 0xD6
INCzx = 0xF6

SLOzx = 0x17
RLAzx = 0x37
SREzx = 0x57
RRAzx = 0x77
SAXzy = 0x97
LAXzy = 0xB7
DCPzx = 0xD7
ISBzx = 0xF7

CLCn = 0x18
SECn = 0x38
CLIn = 0x58
SEIn = 0x78
TYAn = 0x98
CLVn = 0xB8
CLDn = 0xD8
SEDn = 0xF8

ORAay = 0x19
ANDay = 0x39
EORay = 0x59
ADCay = 0x79
STAay = 0x99
LDAay = 0xB9
CMPay = 0xD9
SBCay = 0xF9

TXSn = 0x9A
TSXn = 0xBA

SLOay = 0x1B
RLAay = 0x3B
SREay = 0x5B
RRAay = 0x7B
SHSay = 0x9B
TASay = 0x9B
LASay = 0xBB
DCPay = 0xDB
ISBay = 0xFB

NOPax = 0x1C
SHYax = 0x9C
LDYax = 0xBC

ORAax = 0x1D
ANDax = 0x3D
EORax = 0x5D
ADCax = 0x7D
STAax = 0x9D
LDAax = 0xBD
CMPax = 0xDD
SBCax = 0xFD

ASLax = 0x1E
ROLax = 0x3E
LSRax = 0x5E
RORax = 0x7E
SHXay = 0x9E
LDXay = 0xBE
DECax = 0xDE
INCax = 0xFE

SLOax = 0x1F
RLAax = 0x3F
SREax = 0x5F
RRAax = 0x7F
SHAay = 0x9F
LAXay = 0xBF
DCPax = 0xDF
ISBax = 0xFF

# Opcodes that share a behaviour with the named one.
NOPb_ALL = (NOPb, 0x82, 0xC2, 0xE2, 0x89)
NOPz_ALL = (NOPz, 0x44, 0x64)
SBCb_ALL = (SBCb, 0xEB)
NOPn_ALL = (NOPn, 0x1A, 0x3A, 0x5A, 0x7A, 0xDA, 0xFA)
ANCb_ALL = (ANCb, 0x2B)
NOPzx_ALL = (NOPzx, 0x34, 0x54, 0x74, 0xD4, 0xF4)
NOPax_ALL = (NOPax, 0x3C, 0x5C, 0x7C, 0xDC, 0xFC)

# Opcodes that lock up the processor.
HLT_ALL = (0x02, 0x12, 0x22, 0x32, 0x42, 0x52, 0x62, 0x72, 0x92, 0xB2, 0xD2, 0xF2)

# Instruction aliases
ASOix = SLOix
LSEix = SREix
AXSix = SAXix
DCMix = DCPix
INSix = ISBix
ASOz = SLOz
LSEz = SREz
AXSz = SAXz
DCMz = DCPz
INSz = ISBz
ALRb = ASRb
OALb = LXAb
ASOa = SLOa
LSEa = SREa
AXSa = SAXa
DCMa = DCPa
INSa = ISBa
ASOiy = SLOiy
LSEiy = SREiy
AXAiy = SHAiy
DCMiy = DCPiy
INSiy = ISBiy
ASOzx = SLOzx
LSEzx = SREzx
AXSzy = SAXzy
DCMzx = DCPzx
INSzx = ISBzx
ASOay = SLOay
LSEay = SREay
DCMay = DCPay
INSay = ISBay
SAYax = SHYax
XASay = SHXay
ASOax = SLOax
LSEax = SREax
AXAay = SHAay
DCMax = DCPax
INSax = ISBax
SKBn = NOPb
SKWn = NOPa