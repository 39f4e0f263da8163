"""
Pattern Matcher

Each vocabulary table is an ordered list of ``Pattern`` entries. A table is
joined into one alternation with exactly one capturing group per entry, so
the index of the group that matched identifies the entry.

Partial-word entries accept every prefix of the full word down to a short
stem ("sep", "sept", ..., "september"), modelling a user who types only as
much as needed.
"""

import re
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from quickdate.parsing.models import Candidate

# "(" that does not open an extension group such as "(?:" or "(?="
_CAPTURING_GROUP = re.compile(r"\((?!\?)")


class Pattern(NamedTuple):
    """
    An entry of a vocabulary table.

    Either ``value`` is used as is, or ``derive`` computes the value from the
    full match of ``regex`` against the matched text.
    """
    label: str
    regex: str
    value: Any = None
    derive: Optional[Callable[["re.Match[str]"], Any]] = None

    def resolve(self, matched: "re.Match[str]") -> Any:
        return self.derive(matched) if self.derive else self.value


def join(patterns: Sequence[Pattern]) -> str:
    """Join a table into "(p1)|(p2)|..." with inner groups made non-capturing."""
    return "(" + ")|(".join(_CAPTURING_GROUP.sub("(?:", p.regex) for p in patterns) + ")"


def compile_pattern(source: str) -> "re.Pattern[str]":
    return re.compile(source, re.IGNORECASE)


def matched_groups(m: "re.Match[str]") -> List[int]:
    """Indices of the capturing groups that matched non-empty text."""
    return [i for i in range(1, (m.re.groups or 0) + 1) if m.group(i)]


def _fullmatch(pattern: Pattern, text: str) -> Optional["re.Match[str]"]:
    return re.fullmatch(f"(?:{pattern.regex})", text, re.IGNORECASE)


def collect(text: str, patterns: Sequence[Pattern], index: int, multiple: bool = False) -> List[Candidate]:
    """
    Resolve the entry at ``index`` against ``text``.

    With ``multiple``, every later entry that also fully matches ``text`` is
    appended, so an ambiguous prefix yields all the words it may begin.

    Args:
        text: The substring matched by the joined alternation
        patterns: The table the alternation was built from
        index: The table index of the matching entry
        multiple: Whether to gather the remaining matching entries

    Returns:
        The anchor candidate, followed by any gathered ones
    """
    anchor = patterns[index]
    matched = _fullmatch(anchor, text)
    found = [Candidate(label=anchor.label, value=anchor.resolve(matched))]
    if not multiple:
        return found

    for pattern in patterns[index + 1:]:
        matched = _fullmatch(pattern, text)
        if matched:
            found.append(Candidate(label=pattern.label, value=pattern.resolve(matched)))
    return found


def _int_group(group: int) -> Callable[["re.Match[str]"], int]:
    return lambda m: int(m.group(group))


ORDINAL_NAMES = [
    Pattern("fir_st", r"fir(?:s|st)?", 1),
    Pattern("sec_ond", r"sec(?:o|on|ond)?", 2),
    Pattern("thi_rd", r"thi(?:r|rd)?", 3),
    Pattern("fou_rth", r"fou(?:r|rt|rth)?", 4),
    Pattern("fif_th", r"fif(?:t|th)?", 5),
    Pattern("six_th", r"six(?:t|th)?", 6),
    Pattern("sev_enth", r"sev(?:e|en|ent|enth)?", 7),
    Pattern("eig_hth", r"eig(?:h|ht|hth)?", 8),
    Pattern("nin_th/nin_eth", r"nin(?:t|th|e|et|eth)?", 9),
    Pattern("ten_th", r"ten(?:t|th)", 10),
    Pattern("ele_venth", r"ele(?:v|ve|ven|vent|venth)?", 11),
    Pattern("twel_fth/twel_veth", r"\btwel(?:v|ve|vet|veth|f|ft|fth)?\b", 12),
]

# ordinal words or up to three digits with an ordinal suffix
ORDINALS = ORDINAL_NAMES + [
    Pattern("d+_th", r"(\d{1,3})(?:st|nd|rd|th)", derive=_int_group(1)),
]

CARDINAL_NAMES = [
    Pattern("one", r"one|a|an", 1),
    Pattern("two", r"two", 2),
    Pattern("thr_ee", r"thr(?:e|ee)?", 3),
    Pattern("fou_r", r"fou(?:r)?", 4),
    Pattern("fiv_e", r"fiv(?:e)?", 5),
    Pattern("six", r"six", 6),
    Pattern("sev_en", r"sev(?:e|en)?", 7),
    Pattern("eig_ht", r"eig(?:h|ht)?", 8),
    Pattern("nin_e", r"nin(?:e)?", 9),
    Pattern("ten", r"ten", 10),
    Pattern("ele_ven", r"ele(?:v|ve|ven)?", 11),
    Pattern("twel_ve", r"twel(?:v|ve)?", 12),
]

# bare "m" is kept as its own entry so callers can tell it from "mo"/"month"
DURATION_NAMES = [
    Pattern("days/dys/ds", r"d|da$|day|days|dy|dys|ds", "day"),
    Pattern("weeks/wks/ws", r"w|we$|wee$|week|weeks|wk|wks|ws", "week"),
    Pattern("m", r"m", "month"),
    Pattern("months/mths/ms", r"mo$|mont$|month|months|mth|mths|ms", "month"),
    Pattern("years/yrs/ys", r"y|ye$|yea$|year|years|yr|yrs|ys", "year"),
]

MONTH_NAMES = [
    Pattern("jan_uary", r"jan(?:u|ua|uar|uary)?", 1),
    Pattern("feb_ruary", r"feb(?:r|ru|rua|ruar|ruary)?", 2),
    Pattern("mar_ch", r"mar(?:c|ch)?", 3),
    Pattern("apr_il", r"apr(?:i|il)?", 4),
    Pattern("may", r"may", 5),
    Pattern("jun_e", r"jun(?:e)?", 6),
    Pattern("jul_y", r"jul(?:y)?", 7),
    Pattern("aug_ust", r"aug(?:u|us|ust)?", 8),
    Pattern("sep_tember", r"sep(?:t|te|tem|temb|tembe|tember)?", 9),
    Pattern("oct_ober", r"oct(?:o|ob|obe|ober)?", 10),
    Pattern("nov_ember", r"nov(?:e|em|emb|embe|ember)?", 11),
    Pattern("dec_ember", r"dec(?:e|em|emb|embe|ember)?", 12),
]

MONTH_PREFIXES = [
    Pattern("ja(nuary", r"j|ja", 1),
    Pattern("fe(bruary", r"f|fe", 2),
    Pattern("ma(rch", r"m|ma", 3),
    Pattern("ap(ril", r"a|ap", 4),
    Pattern("ma(y", r"m|ma", 5),
    Pattern("ju(ne", r"j|ju", 6),
    Pattern("ju(ly", r"j|ju", 7),
    Pattern("au(gust", r"a|au", 8),
    Pattern("se(ptember", r"s|se", 9),
    Pattern("oc(tober", r"o|oc", 10),
    Pattern("no(vember", r"n|no", 11),
    Pattern("de(cember", r"d|de", 12),
]

WEEKDAY_NAMES = [
    Pattern("mon_day", r"mon(?:d|da|day)?", "mon"),
    Pattern("tue_sday", r"tue(?:s|sd|sda|sday)?", "tue"),
    Pattern("wed_nesday", r"wed(?:n|ne|nes|nesd|nesda|nesday)?", "wed"),
    Pattern("thu_rsday", r"thu(?:r|rs|rsd|rsda|rsday)?", "thu"),
    Pattern("fri_day", r"fri(?:d|da|day)?", "fri"),
    Pattern("sat_urday", r"sat(?:u|ur|urd|urda|urday)?", "sat"),
    Pattern("sun_day", r"sun(?:d|da|day)?", "sun"),
]

WEEKDAY_PREFIXES = [
    Pattern("mo(nday", r"m|mo", "mon"),
    Pattern("tu(esday", r"t|tu", "tue"),
    Pattern("we(dnesday", r"w|we", "wed"),
    Pattern("th(ursday", r"t|th", "thu"),
    Pattern("fr(iday", r"f|fr", "fri"),
    Pattern("sa(turday", r"s|sa", "sat"),
    Pattern("su(nday", r"s|su", "sun"),
]

PAST_INDICATORS = [
    Pattern("before", r"bef|befo|befor|before", True),
    Pattern("ago", r"ago", True),
    Pattern("earlier", r"ear|earl|earli|earlie|earlier", True),
]
