"""Heroicons template icons.

Code generated by pyheroicons codegen; DO NOT EDIT.

Each constant is a template Icon carrying its variant's defaults. Pass one
to configure_icon() to apply overrides; bodies are resolved from the bundled
dataset on first render.
"""

from pyheroicons.exceptions import IconNotFoundError
from pyheroicons.models.icon import Icon, IconVariant

AcademicCap = Icon(name="academic-cap", variant=IconVariant.OUTLINE)
AcademicCapMicro = Icon(name="academic-cap-16-solid", variant=IconVariant.MICRO)
AcademicCapMini = Icon(name="academic-cap-20-solid", variant=IconVariant.MINI)
AcademicCapSolid = Icon(name="academic-cap-solid", variant=IconVariant.SOLID)
ArrowRight = Icon(name="arrow-right", variant=IconVariant.OUTLINE)
ArrowRightSolid = Icon(name="arrow-right-solid", variant=IconVariant.SOLID)
Bars3 = Icon(name="bars-3", variant=IconVariant.OUTLINE)
Bars3Mini = Icon(name="bars-3-20-solid", variant=IconVariant.MINI)
Check = Icon(name="check", variant=IconVariant.OUTLINE)
CheckMicro = Icon(name="check-16-solid", variant=IconVariant.MICRO)
CheckMini = Icon(name="check-20-solid", variant=IconVariant.MINI)
CheckSolid = Icon(name="check-solid", variant=IconVariant.SOLID)
ChevronDown = Icon(name="chevron-down", variant=IconVariant.OUTLINE)
ChevronDownMini = Icon(name="chevron-down-20-solid", variant=IconVariant.MINI)
Heart = Icon(name="heart", variant=IconVariant.OUTLINE)
HeartSolid = Icon(name="heart-solid", variant=IconVariant.SOLID)
Minus = Icon(name="minus", variant=IconVariant.OUTLINE)
MinusSolid = Icon(name="minus-solid", variant=IconVariant.SOLID)
Moon = Icon(name="moon", variant=IconVariant.OUTLINE)
MoonMicro = Icon(name="moon-16-solid", variant=IconVariant.MICRO)
MoonMini = Icon(name="moon-20-solid", variant=IconVariant.MINI)
MoonSolid = Icon(name="moon-solid", variant=IconVariant.SOLID)
Plus = Icon(name="plus", variant=IconVariant.OUTLINE)
PlusMicro = Icon(name="plus-16-solid", variant=IconVariant.MICRO)
PlusMini = Icon(name="plus-20-solid", variant=IconVariant.MINI)
PlusSolid = Icon(name="plus-solid", variant=IconVariant.SOLID)
Sun = Icon(name="sun", variant=IconVariant.OUTLINE)
SunMicro = Icon(name="sun-16-solid", variant=IconVariant.MICRO)
SunMini = Icon(name="sun-20-solid", variant=IconVariant.MINI)
SunSolid = Icon(name="sun-solid", variant=IconVariant.SOLID)
XMark = Icon(name="x-mark", variant=IconVariant.OUTLINE)
XMarkMicro = Icon(name="x-mark-16-solid", variant=IconVariant.MICRO)
XMarkMini = Icon(name="x-mark-20-solid", variant=IconVariant.MINI)
XMarkSolid = Icon(name="x-mark-solid", variant=IconVariant.SOLID)

ICONS: dict[str, Icon] = {
    "academic-cap": AcademicCap,
    "academic-cap-16-solid": AcademicCapMicro,
    "academic-cap-20-solid": AcademicCapMini,
    "academic-cap-solid": AcademicCapSolid,
    "arrow-right": ArrowRight,
    "arrow-right-solid": ArrowRightSolid,
    "bars-3": Bars3,
    "bars-3-20-solid": Bars3Mini,
    "check": Check,
    "check-16-solid": CheckMicro,
    "check-20-solid": CheckMini,
    "check-solid": CheckSolid,
    "chevron-down": ChevronDown,
    "chevron-down-20-solid": ChevronDownMini,
    "heart": Heart,
    "heart-solid": HeartSolid,
    "minus": Minus,
    "minus-solid": MinusSolid,
    "moon": Moon,
    "moon-16-solid": MoonMicro,
    "moon-20-solid": MoonMini,
    "moon-solid": MoonSolid,
    "plus": Plus,
    "plus-16-solid": PlusMicro,
    "plus-20-solid": PlusMini,
    "plus-solid": PlusSolid,
    "sun": Sun,
    "sun-16-solid": SunMicro,
    "sun-20-solid": SunMini,
    "sun-solid": SunSolid,
    "x-mark": XMark,
    "x-mark-16-solid": XMarkMicro,
    "x-mark-20-solid": XMarkMini,
    "x-mark-solid": XMarkSolid,
}


def get_icon(name: str) -> Icon:
    """Look up a template icon by its dataset name.

    Raises:
        IconNotFoundError: If no template exists for the name.
    """
    try:
        return ICONS[name]
    except KeyError:
        raise IconNotFoundError(name) from None
