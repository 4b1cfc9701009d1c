"""Keyboard key codes.

Printable keys use their character code. Other keys are scancodes with the
scancode bit set, and a few extended keys carry the extended bit.
"""

from __future__ import annotations

from enum import IntEnum

EXTENDED_MASK = 1 << 29
SCANCODE_MASK = 1 << 30

__all__ = [
    "EXTENDED_MASK",
    "SCANCODE_MASK",
    "Key",
    "KeyCode",
    "scancode_to_keycode",
]


def scancode_to_keycode(scancode: int) -> int:
    """Return the key code for a physical scancode."""
    if not isinstance(scancode, int) or isinstance(scancode, bool):
        raise TypeError(f"scancode must be an int, not {type(scancode).__name__}")
    if scancode < 0:
        raise ValueError(f"scancode must be non-negative, got {scancode}")
    return scancode | SCANCODE_MASK


class KeyCode(IntEnum):
    """Every key code known to the engine."""

    UNKNOWN = 0x00000000
    RETURN = 0x0000000D
    ESCAPE = 0x0000001B
    BACKSPACE = 0x00000008
    TAB = 0x00000009
    SPACE = 0x00000020
    EXCLAIM = 0x00000021
    DBLAPOSTROPHE = 0x00000022
    HASH = 0x00000023
    DOLLAR = 0x00000024
    PERCENT = 0x00000025
    AMPERSAND = 0x00000026
    APOSTROPHE = 0x00000027
    LEFTPAREN = 0x00000028
    RIGHTPAREN = 0x00000029
    ASTERISK = 0x0000002A
    PLUS = 0x0000002B
    COMMA = 0x0000002C
    MINUS = 0x0000002D
    PERIOD = 0x0000002E
    SLASH = 0x0000002F
    DIGIT_0 = 0x00000030
    DIGIT_1 = 0x00000031
    DIGIT_2 = 0x00000032
    DIGIT_3 = 0x00000033
    DIGIT_4 = 0x00000034
    DIGIT_5 = 0x00000035
    DIGIT_6 = 0x00000036
    DIGIT_7 = 0x00000037
    DIGIT_8 = 0x00000038
    DIGIT_9 = 0x00000039
    COLON = 0x0000003A
    SEMICOLON = 0x0000003B
    LESS = 0x0000003C
    EQUALS = 0x0000003D
    GREATER = 0x0000003E
    QUESTION = 0x0000003F
    AT = 0x00000040
    LEFTBRACKET = 0x0000005B
    BACKSLASH = 0x0000005C
    RIGHTBRACKET = 0x0000005D
    CARET = 0x0000005E
    UNDERSCORE = 0x0000005F
    GRAVE = 0x00000060
    A = 0x00000061
    B = 0x00000062
    C = 0x00000063
    D = 0x00000064
    E = 0x00000065
    F = 0x00000066
    G = 0x00000067
    H = 0x00000068
    I = 0x00000069  # noqa: E741
    J = 0x0000006A
    K = 0x0000006B
    L = 0x0000006C
    M = 0x0000006D
    N = 0x0000006E
    O = 0x0000006F  # noqa: E741
    P = 0x00000070
    Q = 0x00000071
    R = 0x00000072
    S = 0x00000073
    T = 0x00000074
    U = 0x00000075
    V = 0x00000076
    W = 0x00000077
    X = 0x00000078
    Y = 0x00000079
    Z = 0x0000007A
    LEFTBRACE = 0x0000007B
    PIPE = 0x0000007C
    RIGHTBRACE = 0x0000007D
    TILDE = 0x0000007E
    DELETE = 0x0000007F
    PLUSMINUS = 0x000000B1
    CAPSLOCK = 0x40000039
    F1 = 0x4000003A
    F2 = 0x4000003B
    F3 = 0x4000003C
    F4 = 0x4000003D
    F5 = 0x4000003E
    F6 = 0x4000003F
    F7 = 0x40000040
    F8 = 0x40000041
    F9 = 0x40000042
    F10 = 0x40000043
    F11 = 0x40000044
    F12 = 0x40000045
    PRINTSCREEN = 0x40000046
    SCROLLLOCK = 0x40000047
    PAUSE = 0x40000048
    INSERT = 0x40000049
    HOME = 0x4000004A
    PAGEUP = 0x4000004B
    END = 0x4000004D
    PAGEDOWN = 0x4000004E
    RIGHT = 0x4000004F
    LEFT = 0x40000050
    DOWN = 0x40000051
    UP = 0x40000052
    NUMLOCKCLEAR = 0x40000053
    KP_DIVIDE = 0x40000054
    KP_MULTIPLY = 0x40000055
    KP_MINUS = 0x40000056
    KP_PLUS = 0x40000057
    KP_ENTER = 0x40000058
    KP_1 = 0x40000059
    KP_2 = 0x4000005A
    KP_3 = 0x4000005B
    KP_4 = 0x4000005C
    KP_5 = 0x4000005D
    KP_6 = 0x4000005E
    KP_7 = 0x4000005F
    KP_8 = 0x40000060
    KP_9 = 0x40000061
    KP_0 = 0x40000062
    KP_PERIOD = 0x40000063
    APPLICATION = 0x40000065
    POWER = 0x40000066
    KP_EQUALS = 0x40000067
    F13 = 0x40000068
    F14 = 0x40000069
    F15 = 0x4000006A
    F16 = 0x4000006B
    F17 = 0x4000006C
    F18 = 0x4000006D
    F19 = 0x4000006E
    F20 = 0x4000006F
    F21 = 0x40000070
    F22 = 0x40000071
    F23 = 0x40000072
    F24 = 0x40000073
    EXECUTE = 0x40000074
    HELP = 0x40000075
    MENU = 0x40000076
    SELECT = 0x40000077
    STOP = 0x40000078
    AGAIN = 0x40000079
    UNDO = 0x4000007A
    CUT = 0x4000007B
    COPY = 0x4000007C
    PASTE = 0x4000007D
    FIND = 0x4000007E
    MUTE = 0x4000007F
    VOLUMEUP = 0x40000080
    VOLUMEDOWN = 0x40000081
    KP_COMMA = 0x40000085
    KP_EQUALSAS400 = 0x40000086
    ALTERASE = 0x40000099
    SYSREQ = 0x4000009A
    CANCEL = 0x4000009B
    CLEAR = 0x4000009C
    PRIOR = 0x4000009D
    RETURN2 = 0x4000009E
    SEPARATOR = 0x4000009F
    OUT = 0x400000A0
    OPER = 0x400000A1
    CLEARAGAIN = 0x400000A2
    CRSEL = 0x400000A3
    EXSEL = 0x400000A4
    KP_00 = 0x400000B0
    KP_000 = 0x400000B1
    THOUSANDSSEPARATOR = 0x400000B2
    DECIMALSEPARATOR = 0x400000B3
    CURRENCYUNIT = 0x400000B4
    CURRENCYSUBUNIT = 0x400000B5
    KP_LEFTPAREN = 0x400000B6
    KP_RIGHTPAREN = 0x400000B7
    KP_LEFTBRACE = 0x400000B8
    KP_RIGHTBRACE = 0x400000B9
    KP_TAB = 0x400000BA
    KP_BACKSPACE = 0x400000BB
    KP_A = 0x400000BC
    KP_B = 0x400000BD
    KP_C = 0x400000BE
    KP_D = 0x400000BF
    KP_E = 0x400000C0
    KP_F = 0x400000C1
    KP_XOR = 0x400000C2
    KP_POWER = 0x400000C3
    KP_PERCENT = 0x400000C4
    KP_LESS = 0x400000C5
    KP_GREATER = 0x400000C6
    KP_AMPERSAND = 0x400000C7
    KP_DBLAMPERSAND = 0x400000C8
    KP_VERTICALBAR = 0x400000C9
    KP_DBLVERTICALBAR = 0x400000CA
    KP_COLON = 0x400000CB
    KP_HASH = 0x400000CC
    KP_SPACE = 0x400000CD
    KP_AT = 0x400000CE
    KP_EXCLAM = 0x400000CF
    KP_MEMSTORE = 0x400000D0
    KP_MEMRECALL = 0x400000D1
    KP_MEMCLEAR = 0x400000D2
    KP_MEMADD = 0x400000D3
    KP_MEMSUBTRACT = 0x400000D4
    KP_MEMMULTIPLY = 0x400000D5
    KP_MEMDIVIDE = 0x400000D6
    KP_PLUSMINUS = 0x400000D7
    KP_CLEAR = 0x400000D8
    KP_CLEARENTRY = 0x400000D9
    KP_BINARY = 0x400000DA
    KP_OCTAL = 0x400000DB
    KP_DECIMAL = 0x400000DC
    KP_HEXADECIMAL = 0x400000DD
    LCTRL = 0x400000E0
    LSHIFT = 0x400000E1
    LALT = 0x400000E2
    LGUI = 0x400000E3
    RCTRL = 0x400000E4
    RSHIFT = 0x400000E5
    RALT = 0x400000E6
    RGUI = 0x400000E7
    MODE = 0x40000101
    SLEEP = 0x40000102
    WAKE = 0x40000103
    CHANNEL_INCREMENT = 0x40000104
    CHANNEL_DECREMENT = 0x40000105
    MEDIA_PLAY = 0x40000106
    MEDIA_PAUSE = 0x40000107
    MEDIA_RECORD = 0x40000108
    MEDIA_FAST_FORWARD = 0x40000109
    MEDIA_REWIND = 0x4000010A
    MEDIA_NEXT_TRACK = 0x4000010B
    MEDIA_PREVIOUS_TRACK = 0x4000010C
    MEDIA_STOP = 0x4000010D
    MEDIA_EJECT = 0x4000010E
    MEDIA_PLAY_PAUSE = 0x4000010F
    MEDIA_SELECT = 0x40000110
    AC_NEW = 0x40000111
    AC_OPEN = 0x40000112
    AC_CLOSE = 0x40000113
    AC_EXIT = 0x40000114
    AC_SAVE = 0x40000115
    AC_PRINT = 0x40000116
    AC_PROPERTIES = 0x40000117
    AC_SEARCH = 0x40000118
    AC_HOME = 0x40000119
    AC_BACK = 0x4000011A
    AC_FORWARD = 0x4000011B
    AC_STOP = 0x4000011C
    AC_REFRESH = 0x4000011D
    AC_BOOKMARKS = 0x4000011E
    SOFTLEFT = 0x4000011F
    SOFTRIGHT = 0x40000120
    CALL = 0x40000121
    ENDCALL = 0x40000122
    LEFT_TAB = 0x20000001
    LEVEL5_SHIFT = 0x20000002
    MULTI_KEY_COMPOSE = 0x20000003
    LMETA = 0x20000004
    RMETA = 0x20000005
    LHYPER = 0x20000006
    RHYPER = 0x20000007


class Key(IntEnum):
    """The keys the engine's input handling refers to by name."""

    SPACE = KeyCode.SPACE.value
    APOSTROPHE = KeyCode.APOSTROPHE.value
    COMMA = KeyCode.COMMA.value
    MINUS = KeyCode.MINUS.value
    PERIOD = KeyCode.PERIOD.value
    SLASH = KeyCode.SLASH.value

    D0 = KeyCode.DIGIT_0.value
    D1 = KeyCode.DIGIT_1.value
    D2 = KeyCode.DIGIT_2.value
    D3 = KeyCode.DIGIT_3.value
    D4 = KeyCode.DIGIT_4.value
    D5 = KeyCode.DIGIT_5.value
    D6 = KeyCode.DIGIT_6.value
    D7 = KeyCode.DIGIT_7.value
    D8 = KeyCode.DIGIT_8.value
    D9 = KeyCode.DIGIT_9.value

    SEMICOLON = KeyCode.SEMICOLON.value
    EQUAL = KeyCode.EQUALS.value

    A = KeyCode.A.value
    B = KeyCode.B.value
    C = KeyCode.C.value
    D = KeyCode.D.value
    E = KeyCode.E.value
    F = KeyCode.F.value
    G = KeyCode.G.value
    H = KeyCode.H.value
    I = KeyCode.I.value  # noqa: E741
    J = KeyCode.J.value
    K = KeyCode.K.value
    L = KeyCode.L.value
    M = KeyCode.M.value
    N = KeyCode.N.value
    O = KeyCode.O.value  # noqa: E741
    P = KeyCode.P.value
    Q = KeyCode.Q.value
    R = KeyCode.R.value
    S = KeyCode.S.value
    T = KeyCode.T.value
    U = KeyCode.U.value
    V = KeyCode.V.value
    W = KeyCode.W.value
    X = KeyCode.X.value
    Y = KeyCode.Y.value
    Z = KeyCode.Z.value

    LEFT_BRACKET = KeyCode.LEFTBRACKET.value
    BACKSLASH = KeyCode.BACKSLASH.value
    RIGHT_BRACKET = KeyCode.RIGHTBRACKET.value
    GRAVE_ACCENT = KeyCode.GRAVE.value

    ESCAPE = KeyCode.ESCAPE.value
    ENTER = KeyCode.RETURN.value
    TAB = KeyCode.TAB.value
    BACKSPACE = KeyCode.BACKSPACE.value
    INSERT = KeyCode.INSERT.value
    DELETE = KeyCode.DELETE.value
    RIGHT = KeyCode.RIGHT.value
    LEFT = KeyCode.LEFT.value
    DOWN = KeyCode.DOWN.value
    UP = KeyCode.UP.value
    PAGE_UP = KeyCode.PAGEUP.value
    PAGE_DOWN = KeyCode.PAGEDOWN.value
    HOME = KeyCode.HOME.value
    END = KeyCode.END.value
    CAPS_LOCK = KeyCode.CAPSLOCK.value
    SCROLL_LOCK = KeyCode.SCROLLLOCK.value
    NUM_LOCK = KeyCode.NUMLOCKCLEAR.value
    PRINT_SCREEN = KeyCode.PRINTSCREEN.value
    PAUSE = KeyCode.PAUSE.value
    F1 = KeyCode.F1.value
    F2 = KeyCode.F2.value
    F3 = KeyCode.F3.value
    F4 = KeyCode.F4.value
    F5 = KeyCode.F5.value
    F6 = KeyCode.F6.value
    F7 = KeyCode.F7.value
    F8 = KeyCode.F8.value
    F9 = KeyCode.F9.value
    F10 = KeyCode.F10.value
    F11 = KeyCode.F11.value
    F12 = KeyCode.F12.value
    F13 = KeyCode.F13.value
    F14 = KeyCode.F14.value
    F15 = KeyCode.F15.value
    F16 = KeyCode.F16.value
    F17 = KeyCode.F17.value
    F18 = KeyCode.F18.value
    F19 = KeyCode.F19.value
    F20 = KeyCode.F20.value
    F21 = KeyCode.F21.value
    F22 = KeyCode.F22.value
    F23 = KeyCode.F23.value
    F24 = KeyCode.F24.value

    KP0 = KeyCode.KP_0.value
    KP1 = KeyCode.KP_1.value
    KP2 = KeyCode.KP_2.value
    KP3 = KeyCode.KP_3.value
    KP4 = KeyCode.KP_4.value
    KP5 = KeyCode.KP_5.value
    KP6 = KeyCode.KP_6.value
    KP7 = KeyCode.KP_7.value
    KP8 = KeyCode.KP_8.value
    KP9 = KeyCode.KP_9.value
    KP_DECIMAL = KeyCode.KP_DECIMAL.value
    KP_DIVIDE = KeyCode.KP_DIVIDE.value
    KP_MULTIPLY = KeyCode.KP_MULTIPLY.value
    KP_SUBTRACT = KeyCode.KP_MEMSUBTRACT.value
    KP_ADD = KeyCode.KP_MEMADD.value
    KP_ENTER = KeyCode.KP_ENTER.value
    KP_EQUAL = KeyCode.KP_EQUALS.value
    MENU = KeyCode.MENU.value