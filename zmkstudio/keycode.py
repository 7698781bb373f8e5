"""ZMK keycodes and the names they are known by."""

from __future__ import annotations

from enum import IntEnum


class Keycode(IntEnum):
    """A ZMK keycode, valued by its encoded HID usage.

    Member names are the canonical keycode names. Further accepted
    aliases are resolved by :meth:`from_name`.
    """

    SYS_PWR = 0x00010081
    SYS_SLEEP = 0x00010082
    SYS_WAKE = 0x00010083
    A = 0x00070004
    B = 0x00070005
    C = 0x00070006
    D = 0x00070007
    E = 0x00070008
    F = 0x00070009
    G = 0x0007000A
    H = 0x0007000B
    I = 0x0007000C  # noqa: E741
    J = 0x0007000D
    K = 0x0007000E
    L = 0x0007000F
    M = 0x00070010
    N = 0x00070011
    O = 0x00070012  # noqa: E741
    P = 0x00070013
    Q = 0x00070014
    R = 0x00070015
    S = 0x00070016
    T = 0x00070017
    U = 0x00070018
    V = 0x00070019
    W = 0x0007001A
    X = 0x0007001B
    Y = 0x0007001C
    Z = 0x0007001D
    NUM_1 = 0x0007001E
    NUM_2 = 0x0007001F
    NUM_3 = 0x00070020
    NUM_4 = 0x00070021
    NUM_5 = 0x00070022
    NUM_6 = 0x00070023
    NUM_7 = 0x00070024
    NUM_8 = 0x00070025
    NUM_9 = 0x00070026
    NUM_0 = 0x00070027
    ENTER = 0x00070028
    ESC = 0x00070029
    BSPC = 0x0007002A
    TAB = 0x0007002B
    SPC = 0x0007002C
    MINUS = 0x0007002D
    EQL = 0x0007002E
    BSLH = 0x00070031
    NUHS = 0x00070032
    SEMI = 0x00070033
    APOSTROPHE = 0x00070034
    GRAV = 0x00070035
    CMMA = 0x00070036
    DOT = 0x00070037
    FSLH = 0x00070038
    CLCK = 0x00070039
    F1 = 0x0007003A
    F2 = 0x0007003B
    F3 = 0x0007003C
    F4 = 0x0007003D
    F5 = 0x0007003E
    F6 = 0x0007003F
    F7 = 0x00070040
    F8 = 0x00070041
    F9 = 0x00070042
    F10 = 0x00070043
    F11 = 0x00070044
    F12 = 0x00070045
    PSCRN = 0x00070046
    SLCK = 0x00070047
    PAUS = 0x00070048
    INS = 0x00070049
    HOME = 0x0007004A
    PG_UP = 0x0007004B
    DEL = 0x0007004C
    END = 0x0007004D
    PG_DN = 0x0007004E
    RIGHT = 0x0007004F
    LEFT = 0x00070050
    DOWN = 0x00070051
    UARW = 0x00070052
    KP_NLCK = 0x00070053
    KP_SLASH = 0x00070054
    KP_MULTIPLY = 0x00070055
    KP_MINUS = 0x00070056
    KPLS = 0x00070057
    KP_ENTER = 0x00070058
    KP_N1 = 0x00070059
    KP_N2 = 0x0007005A
    KP_N3 = 0x0007005B
    KP_N4 = 0x0007005C
    KP_N5 = 0x0007005D
    KP_N6 = 0x0007005E
    KP_N7 = 0x0007005F
    KP_N8 = 0x00070060
    KP_N9 = 0x00070061
    KP_N0 = 0x00070062
    KP_DOT = 0x00070063
    K_APPLICATION = 0x00070065
    K_PWR = 0x00070066
    KP_EQUAL = 0x00070067
    F13 = 0x00070068
    F14 = 0x00070069
    F15 = 0x0007006A
    F16 = 0x0007006B
    F17 = 0x0007006C
    F18 = 0x0007006D
    F19 = 0x0007006E
    F20 = 0x0007006F
    F21 = 0x00070070
    F22 = 0x00070071
    F23 = 0x00070072
    F24 = 0x00070073
    K_EXEC = 0x00070074
    K_HELP = 0x00070075
    K_MENU = 0x00070076
    K_SELECT = 0x00070077
    K_STOP = 0x00070078
    K_REDO = 0x00070079
    UNDO = 0x0007007A
    CUT = 0x0007007B
    COPY = 0x0007007C
    PSTE = 0x0007007D
    K_FIND = 0x0007007E
    K_MUTE = 0x0007007F
    K_VOL_UP = 0x00070080
    K_VOL_DN = 0x00070081
    LCAPS = 0x00070082
    LNLCK = 0x00070083
    LSLCK = 0x00070084
    KP_COMMA = 0x00070085
    KP_EQUAL_AS400 = 0x00070086
    INT_RO = 0x00070087
    INTERNATIONAL_2 = 0x00070088
    INT_YEN = 0x00070089
    INT_HENKAN = 0x0007008A
    INT_MUHENKAN = 0x0007008B
    INT_KPJPCOMMA = 0x0007008C
    INT7 = 0x0007008D
    INT8 = 0x0007008E
    INT9 = 0x0007008F
    LANGUAGE_1 = 0x00070090
    LANGUAGE_2 = 0x00070091
    LANGUAGE_3 = 0x00070092
    LANGUAGE_4 = 0x00070093
    LANGUAGE_5 = 0x00070094
    LANG6 = 0x00070095
    LANG7 = 0x00070096
    LANG8 = 0x00070097
    LANG9 = 0x00070098
    ALT_ERASE = 0x00070099
    SYSREQ = 0x0007009A
    K_CANCEL = 0x0007009B
    CLEAR = 0x0007009C
    PRIOR = 0x0007009D
    RET2 = 0x0007009E
    SEPARATOR = 0x0007009F
    OUT = 0x000700A0
    OPER = 0x000700A1
    CLEAR_AGAIN = 0x000700A2
    CRSEL = 0x000700A3
    EXSEL = 0x000700A4
    KP_LPAR = 0x000700B6
    KP_RPAR = 0x000700B7
    KP_CLEAR = 0x000700D8
    LCTRL = 0x000700E0
    LSHIFT = 0x000700E1
    LALT = 0x000700E2
    LEFT_META = 0x000700E3
    RCTRL = 0x000700E4
    RSHIFT = 0x000700E5
    RALT = 0x000700E6
    RIGHT_META = 0x000700E7
    K_PP = 0x000700E8
    K_STOP2 = 0x000700E9
    K_PREV = 0x000700EA
    K_NEXT = 0x000700EB
    K_EJECT = 0x000700EC
    K_VOL_UP2 = 0x000700ED
    K_VOL_DN2 = 0x000700EE
    K_MUTE2 = 0x000700EF
    K_WWW = 0x000700F0
    K_BACK = 0x000700F1
    K_FORWARD = 0x000700F2
    K_STOP3 = 0x000700F3
    K_FIND2 = 0x000700F4
    K_SCROLL_UP = 0x000700F5
    K_SCROLL_DOWN = 0x000700F6
    K_EDIT = 0x000700F7
    K_SLEEP = 0x000700F8
    K_COFFEE = 0x000700F9
    K_REFRESH = 0x000700FA
    K_CALC = 0x000700FB
    C_PWR = 0x000C0030
    C_RESET = 0x000C0031
    C_SLEEP = 0x000C0032
    C_SLEEP_MODE = 0x000C0034
    C_MENU = 0x000C0040
    C_MENU_PICK = 0x000C0041
    C_MENU_UP = 0x000C0042
    C_MENU_DOWN = 0x000C0043
    C_MENU_LEFT = 0x000C0044
    C_MENU_RIGHT = 0x000C0045
    C_MENU_ESC = 0x000C0046
    C_MENU_INC = 0x000C0047
    C_MENU_DEC = 0x000C0048
    C_DATA_ON_SCREEN = 0x000C0060
    C_CAPTIONS = 0x000C0061
    C_SNAPSHOT = 0x000C0065
    C_PIP = 0x000C0067
    C_RED = 0x000C0069
    C_GREEN = 0x000C006A
    C_BLUE = 0x000C006B
    C_YELLOW = 0x000C006C
    C_ASPECT = 0x000C006D
    C_MODE_STEP = 0x000C0082
    C_CHAN_LAST = 0x000C0083
    C_MEDIA_TV = 0x000C0089
    C_MEDIA_WWW = 0x000C008A
    C_MEDIA_DVD = 0x000C008B
    C_MEDIA_PHONE = 0x000C008C
    C_MEDIA_GAMES = 0x000C008F
    C_MEDIA_CD = 0x000C0091
    C_MEDIA_VCR = 0x000C0092
    C_MEDIA_TUNER = 0x000C0093
    C_QUIT = 0x000C0094
    C_HELP = 0x000C0095
    C_MEDIA_TAPE = 0x000C0096
    C_MEDIA_CABLE = 0x000C0097
    C_MEDIA_HOME = 0x000C009A
    C_CHAN_INC = 0x000C009C
    C_CHAN_DEC = 0x000C009D
    C_MEDIA_VCR_PLUS = 0x000C00A0
    C_PLAY = 0x000C00B0
    C_PAUSE = 0x000C00B1
    C_REC = 0x000C00B2
    C_FF = 0x000C00B3
    C_RW = 0x000C00B4
    M_NEXT = 0x000C00B5
    M_PREV = 0x000C00B6
    M_STOP = 0x000C00B7
    M_EJCT = 0x000C00B8
    C_SHUFFLE = 0x000C00B9
    C_REPEAT = 0x000C00BC
    C_SLOW2 = 0x000C00BF
    C_STOP_EJECT = 0x000C00CC
    M_PLAY = 0x000C00CD
    C_VOICE_COMMAND = 0x000C00CF
    M_MUTE = 0x000C00E2
    C_BASS_BOOST = 0x000C00E5
    C_VOL_UP = 0x000C00E9
    C_VOL_DN = 0x000C00EA
    C_SLOW = 0x000C00F5
    C_AL_WORD = 0x000C0184
    C_AL_TEXT_EDITOR = 0x000C0185
    C_AL_SHEET = 0x000C0186
    C_AL_DB = 0x000C0189
    C_AL_MAIL = 0x000C018A
    C_AL_NEWS = 0x000C018B
    C_AL_VOICEMAIL = 0x000C018C
    C_AL_CAL = 0x000C018E
    C_AL_JOURNAL = 0x000C0190
    C_AL_FINANCE = 0x000C0191
    C_AL_CALC = 0x000C0192
    C_AL_WWW = 0x000C0196
    C_AL_CHAT = 0x000C0199
    C_AL_LOGOFF = 0x000C019C
    C_AL_CONTROL_PANEL = 0x000C019F
    C_AL_HELP = 0x000C01A6
    C_AL_DOCS = 0x000C01A7
    C_AL_SPELL = 0x000C01AB
    C_AL_SCREEN_SAVER = 0x000C01B1
    C_AL_FILES = 0x000C01B4
    C_AL_IMAGES = 0x000C01B6
    C_AL_MUSIC = 0x000C01B7
    C_AL_MOVIES = 0x000C01B8
    C_AC_NEW = 0x000C0201
    C_AC_OPEN = 0x000C0202
    C_AC_CLOSE = 0x000C0203
    C_AC_EXIT = 0x000C0204
    C_AC_SAVE = 0x000C0207
    C_AC_PRINT = 0x000C0208
    C_AC_PROPS = 0x000C0209
    C_AC_UNDO = 0x000C021A
    C_AC_COPY = 0x000C021B
    C_AC_CUT = 0x000C021C
    C_AC_PASTE = 0x000C021D
    C_AC_FIND = 0x000C021F
    C_AC_SEARCH = 0x000C0221
    C_AC_GOTO = 0x000C0222
    C_AC_HOME = 0x000C0223
    C_AC_BACK = 0x000C0224
    C_AC_FORWARD = 0x000C0225
    C_AC_STOP = 0x000C0226
    C_AC_REFRESH = 0x000C0227
    C_AC_FAVORITES = 0x000C022A
    C_AC_ZOOM_IN = 0x000C022D
    C_AC_ZOOM_OUT = 0x000C022E
    C_AC_ZOOM = 0x000C022F
    C_AC_VIEW_TOGGLE = 0x000C0232
    C_AC_SCROLL_UP = 0x000C0233
    C_AC_SCROLL_DOWN = 0x000C0234
    C_AC_EDIT = 0x000C023D
    C_AC_CANCEL = 0x000C025F
    C_AC_INS = 0x000C0269
    C_AC_DEL = 0x000C026A
    C_AC_REDO = 0x000C0279
    C_AC_REPLY = 0x000C0289
    C_AC_FORWARD_MAIL = 0x000C028B
    C_AC_SEND = 0x000C028C
    GLOBE = 0x000C029D
    EXCL = 0x0207001E
    ATSN = 0x0207001F
    HASH = 0x02070020
    DLLR = 0x02070021
    PRCNT = 0x02070022
    CRRT = 0x02070023
    AMPS = 0x02070024
    ASTRK = 0x02070025
    UNDER = 0x0207002D
    PLUS = 0x0207002E
    PIPE = 0x02070031
    TILDE2 = 0x02070032
    COLN = 0x02070033
    TILD = 0x02070035
    LABT = 0x02070036
    QMARK = 0x02070038
    CLEAR2 = 0x02070053
    PIPE2 = 0x02070064

    def to_hid_usage(self) -> int:
        """Return the encoded HID usage value."""
        return int(self)

    @classmethod
    def from_hid_usage(cls, encoded: int) -> Keycode | None:
        """Return the keycode for an encoded usage, or None if it is not known."""
        try:
            return cls(encoded)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: str) -> Keycode | None:
        """Return the keycode for a canonical name or alias, or None.

        Matching is case-sensitive.
        """
        member = cls.__members__.get(name)
        if member is not None:
            return member
        canonical = _ALIASES.get(name)
        return cls[canonical] if canonical is not None else None

    def to_name(self) -> str:
        """Return the canonical name of this keycode."""
        return self.name


# Additional accepted names, mapped to the canonical member name.
_ALIASES: dict[str, str] = {
    "N1": "NUM_1",
    "N2": "NUM_2",
    "N3": "NUM_3",
    "N4": "NUM_4",
    "N5": "NUM_5",
    "N6": "NUM_6",
    "N7": "NUM_7",
    "N8": "NUM_8",
    "N9": "NUM_9",
    "N0": "NUM_0",
    "RET": "ENTER",
    "BKSP": "BSPC",
    "SCLN": "SEMI",
    "APOS": "APOSTROPHE",
    "QUOT": "APOSTROPHE",
    "SQT": "APOSTROPHE",
    "CAPS": "CLCK",
    "PRSC": "PSCRN",
    "SCLK": "SLCK",
    "PGUP": "PG_UP",
    "PGDN": "PG_DN",
    "RARW": "RIGHT",
    "LARW": "LEFT",
    "DARW": "DOWN",
    "UP": "UARW",
    "KP_NUM": "KP_NLCK",
    "KDIV": "KP_SLASH",
    "KMLT": "KP_MULTIPLY",
    "KMIN": "KP_MINUS",
    "GUI": "K_APPLICATION",
    "K_APP": "K_APPLICATION",
    "K_CMENU": "K_APPLICATION",
    "VOLU": "K_VOL_UP",
    "VOLD": "K_VOL_DN",
    "INT1": "INT_RO",
    "INT_KANA": "INTERNATIONAL_2",
    "INT2": "INTERNATIONAL_2",
    "INT3": "INT_YEN",
    "INT4": "INT_HENKAN",
    "INT5": "INT_MUHENKAN",
    "INT6": "INT_KPJPCOMMA",
    "LANG1": "LANGUAGE_1",
    "LANG2": "LANGUAGE_2",
    "LANG3": "LANGUAGE_3",
    "LANG4": "LANGUAGE_4",
    "LANG5": "LANGUAGE_5",
    "LCTL": "LCTRL",
    "LSFT": "LSHIFT",
    "LSHFT": "LSHIFT",
    "LCMD": "LEFT_META",
    "LEFT_GUI": "LEFT_META",
    "LEFT_WIN": "LEFT_META",
    "LGUI": "LEFT_META",
    "LMETA": "LEFT_META",
    "LWIN": "LEFT_META",
    "RCTL": "RCTRL",
    "RSFT": "RSHIFT",
    "RSHFT": "RSHIFT",
    "RCMD": "RIGHT_META",
    "RGUI": "RIGHT_META",
    "RIGHT_GUI": "RIGHT_META",
    "RIGHT_WIN": "RIGHT_META",
    "RMETA": "RIGHT_META",
    "RWIN": "RIGHT_META",
    "K_LOCK": "K_COFFEE",
    "C_PREV": "M_PREV",
    "C_PP": "M_PLAY",
    "M_VOLU": "C_VOL_UP",
    "M_VOLD": "C_VOL_DN",
    "C_AL_AUDIO": "C_AL_MUSIC",
    "C_AC_BOOKMARKS": "C_AC_FAVORITES",
    "BANG": "EXCL",
    "AT": "ATSN",
    "PRCT": "PRCNT",
    "STAR": "ASTRK",
    "LT": "LABT",
}