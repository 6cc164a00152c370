"""Names of the non-musical keys a note can be mapped onto.

Modifier, navigation and function keys, followed by ``Layout`` (a
layout-dependent character key) and ``Raw`` (a raw keycode).
"""

import typing


KEY_NAMES: typing.Tuple[str, ...] = (
	"Return",
	"Tab",
	"Space",
	"Backspace",
	"Escape",
	"Meta",
	"Shift",
	"CapsLock",
	"Alt",
	"Option",
	"Control",
	"Home",
	"PageUp",
	"PageDown",
	"LeftArrow",
	"RightArrow",
	"DownArrow",
	"UpArrow",
	"F1",
	"F2",
	"F3",
	"F4",
	"F5",
	"F6",
	"F7",
	"F8",
	"F9",
	"F10",
	"F11",
	"F12",
	"Layout",
	"Raw",
)
