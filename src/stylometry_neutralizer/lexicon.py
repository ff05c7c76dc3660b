"""
Static per-language word tables.

Every component takes a ``Lexicon`` at construction (or per call) instead of
reading module globals, so tests can substitute small data sets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from .models import Language


@dataclass(frozen=True, slots=True)
class NumberLabels:
    some: str
    several: str
    many: str
    time_ago: str


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Immutable bundle of word lists used by the transforms and metrics."""

    language: Language
    stopwords: FrozenSet[str]
    common_words: FrozenSet[str]
    cities: Tuple[str, ...]
    first_names: FrozenSet[str]
    pronouns: Tuple[str, ...]
    neutral_pronoun: str
    discourse_pairs: Tuple[Tuple[str, str], ...]
    synonyms: Mapping[str, str]
    number_labels: NumberLabels
    org_suffixes: Tuple[str, ...] = field(
        default=(
            "GmbH",
            "AG",
            "Ltd\\.?",
            "LLC",
            "Corp\\.?",
            "Inc\\.?",
            "SE",
            "KG",
            "OHG",
            "gGmbH",
            "PLC",
            "GbR",
        )
    )

    def is_rare_word(self, word: str) -> bool:
        """Return True for words of 3+ letters missing from the common-word set."""
        normalized = "".join(ch for ch in word.lower() if ch in _RARE_ALPHABET)
        if len(normalized) < 3:
            return False
        return normalized not in self.common_words


_RARE_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyzäöüß")

STOPWORDS_DE = frozenset(
    """
    der die das den dem des ein eine einer einem einen eines und oder aber wenn
    weil dass ob wie ich du er sie es wir ihr mich mir dich dir ihn ihm uns euch
    sich man nicht kein keine keiner in an auf zu von mit bei für nach vor über
    unter zwischen durch gegen ohne um aus bis seit ist war sind waren wird wurde
    werden wurden hat haben hatte hatten sein bin bist seid sei wäre auch noch
    schon nur sehr so dann da hier dort immer nie oft mal ja nein nun jetzt heute
    mehr als denn wann was wer wo warum welche welcher dieser diese dieses jener
    jene jenes alle alles viele mein meine dein deine seine ihre unser euer deren
    dabei damit dazu daher deshalb darum jedoch zwar bereits eigentlich einfach
    natürlich wirklich ziemlich etwa fast kaum vielleicht wohl eben gerade doch
    ganz gar jedenfalls außerdem zudem trotzdem dennoch
    """.split()
)

STOPWORDS_EN = frozenset(
    """
    the a an and or but if when because that which who what where how why
    whether as is are was were be been being have has had do does did will would
    shall should may might can could must i you he she it we they me him her us
    them my your his its our their this these those in on at to for of with by
    from up about into through during before after above below between not no
    nor so yet both either neither each few more most other some such only own
    same than too very just now then here there also already still again once
    always never often all any every much several am got get even well back
    rather quite almost perhaps therefore thus however although though while
    since unless until despite without within against along around among across
    """.split()
)

COMMON_WORDS_EN = frozenset(
    """
    the be to of and a in that have it for not on with he as you do at this but
    his by from they we say her she or an will my one all would there their what
    so up out if about who get which go me when make can like time no just him
    know take people into year your good some could them see other than then now
    look only come its over think also back after use two how our work first well
    way even new want because any these give day most us great between need large
    often hand high place hold point world still own man here where much through
    before should very long down life never each those right ask show try keep
    child few play small end put home read big set air line help boy follow came
    form three sentence tell does went found called said different number head
    around order move part below country plant last school father tree both left
    turn open real feel city state without once white least paper together group
    always music book letter until river car care second enough side face thing
    stand watch story cut done hear stop since walk example late miss idea body
    ship area half rock fire south piece told knew pass farm top whole king space
    heard best hour better true during hundred five remember step early west
    ground interest reach fast sing listen six table travel less morning ten
    simple several vowel toward war lay against pattern slow center love person
    money serve appear road map rain rule govern pull cold notice voice power town
    fine drive short lead night north plan figure star box noun field rest correct
    able pound beauty stood contain front teach week final gave green oh quick
    develop ocean warm free minute strong special behind clear tail produce fact
    street inch multiply nothing course stay wheel full force blue object decide
    surface deep moon island foot busy test record boat common gold possible
    plane instead dry wonder laugh thousand ago ran check game shape equate hot
    brought heat snow bed bring sit perhaps fill east paint language among
    """.split()
)

COMMON_WORDS_DE = frozenset(
    """
    der die das und in ist von zu den mit sich des auf für nicht eine als auch an
    es bei dem war ein so man noch um aus haben nach aber oder einer werden hat
    über wir sie ich nur durch da wenn diesem kann seiner sind im wie mehr wird
    dann alle jetzt vor schon hier ihr bis ihn wurde dass weil diese sehr mich du
    mir ihm uns kein keine viele einen einem ersten anderen wurden jedoch dabei
    damit dazu daher deshalb darum ohne zwischen gegen seit unter neue große
    welche welcher wann welches kommt gibt geht macht sagt sehen heute immer mal
    ja nein nun doch ganz gar eher wohl eben gleich lang kurz alt jung gut
    schlecht groß klein hoch tief weit nah bald oft kommen gehen wissen denken
    glauben finden lassen stehen liegen bleiben nehmen bringen halten heißen
    leben arbeiten spielen sprechen schreiben lesen hören wollen sollen müssen
    dürfen mögen können laufen geben haus stadt land welt mensch kind frau mann
    tag jahr zeit weg hand kopf auge herz geld arbeit schule buch wort frage
    antwort problem lösung idee seite punkt nummer form art weise fall grund ende
    anfang mitte teil gruppe zahl wert name ort raum licht farbe stimme kraft
    straße wald baum wasser feuer erde luft nacht morgen abend woche monat stunde
    minute sekunde ding sache beispiel möglichkeit wichtig einfach richtig falsch
    schön schwer leicht schnell langsam stark schwach neu erste zweite dritte
    letzte andere gleiche selbst viel wenig weniger beide jeder jedes jede klar
    offen erst nie manchmal selten plötzlich gemeinsam allein zusammen bereits
    weiter
    """.split()
)

CITIES_DE: Tuple[str, ...] = (
    "Berlin", "Hamburg", "München", "Köln", "Frankfurt", "Stuttgart",
    "Düsseldorf", "Dortmund", "Essen", "Leipzig", "Bremen", "Dresden",
    "Hannover", "Nürnberg", "Duisburg", "Bochum", "Wuppertal", "Bielefeld",
    "Bonn", "Münster", "Karlsruhe", "Mannheim", "Augsburg", "Wiesbaden",
    "Gelsenkirchen", "Mönchengladbach", "Wien", "Zürich", "Basel", "Bern",
    "Graz", "Salzburg", "Linz", "Innsbruck", "Lausanne", "Genf", "Luzern",
    "Winterthur", "Klagenfurt",
)

CITIES_EN: Tuple[str, ...] = (
    "London", "Manchester", "Birmingham", "Glasgow", "Liverpool", "Bristol",
    "Edinburgh", "Leeds", "Sheffield", "Cardiff", "Belfast", "Newcastle",
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Boston",
    "Seattle", "Denver", "Washington", "Nashville", "Portland", "Las Vegas",
    "Atlanta", "Miami", "Minneapolis", "Detroit", "Louisville", "Baltimore",
    "Toronto", "Vancouver", "Montreal", "Ottawa", "Calgary", "Edmonton",
    "Sydney", "Melbourne", "Brisbane", "Perth", "Adelaide", "Auckland",
    "Paris", "Berlin", "Madrid", "Rome", "Amsterdam", "Tokyo", "Beijing",
)

# High-confidence given names only.
FIRST_NAMES = frozenset(
    """
    Thomas Michael Andreas Stefan Christian Peter Klaus Werner Joachim Jürgen
    Wolfgang Karl Heinz Walter Helmut Günter Dieter Gerhard Rainer Manfred Horst
    Uwe Bernd Rolf Markus Frank Oliver Martin Jan Lukas Finn Felix Jonas
    Maximilian Paul Leon Elias Tobias Florian Philipp Alexander Sebastian Dominic
    Lena Anna Emma Maria Julia Laura Sarah Lisa Hannah Lea Leonie Mia Clara
    Sophie Charlotte Katharina Sandra Nicole Sabine Stefanie Petra Claudia Monika
    Ursula Helga Brigitte Renate Inge Hildegard
    John James Robert David William Richard Joseph Charles Christopher Matthew
    Anthony Donald Mark Steven George Kenneth Andrew Edward Brian Ronald Timothy
    Jason Jeffrey Ryan Jacob Gary Nicholas Eric Jonathan Stephen Larry Justin
    Scott Brandon
    Mary Patricia Jennifer Linda Barbara Elizabeth Susan Jessica Karen Nancy
    Betty Margaret Ashley Dorothy Kimberly Emily Donna Michelle Carol Amanda
    Melissa Deborah Stephanie Rebecca Sharon
    """.split()
)

SYNONYMS_DE: Mapping[str, str] = MappingProxyType(
    {
        "exzellent": "gut",
        "brillant": "gut",
        "grandios": "gut",
        "phänomenal": "gut",
        "außergewöhnlich": "besonders",
        "beeindruckend": "gut",
        "spektakulär": "auffällig",
        "hervorragend": "gut",
        "fabelhaft": "gut",
        "wunderbar": "schön",
        "fantastisch": "gut",
        "schockierend": "überraschend",
        "erschreckend": "unangenehm",
        "katastrophal": "schlecht",
        "verheerend": "schlimm",
        "schrecklich": "schlecht",
        "furchtbar": "schlecht",
        "miserabel": "schlecht",
        "entsetzlich": "schlimm",
        "grauenhaft": "schlimm",
        "absurd": "ungewöhnlich",
        "bizarr": "ungewöhnlich",
        "merkwürdig": "ungewöhnlich",
    }
)

SYNONYMS_EN: Mapping[str, str] = MappingProxyType(
    {
        "excellent": "good",
        "brilliant": "good",
        "spectacular": "notable",
        "phenomenal": "good",
        "extraordinary": "notable",
        "impressive": "good",
        "outstanding": "good",
        "fabulous": "good",
        "wonderful": "nice",
        "fantastic": "good",
        "shocking": "surprising",
        "horrifying": "unpleasant",
        "catastrophic": "bad",
        "devastating": "serious",
        "terrible": "bad",
        "dreadful": "bad",
        "miserable": "bad",
        "atrocious": "bad",
        "horrendous": "bad",
        "absurd": "unusual",
        "bizarre": "unusual",
        "peculiar": "unusual",
        "uncanny": "unusual",
    }
)

# Ordered: earlier pairs are collapsed first.
DISCOURSE_PAIRS_DE: Tuple[Tuple[str, str], ...] = (
    (r"\bdeshalb\s+daher\b", "deshalb"),
    (r"\bdaher\s+deshalb\b", "daher"),
    (r"\bdann\s+anschließend\b", "dann"),
    (r"\banschließend\s+dann\b", "anschließend"),
    (r"\balso\s+deshalb\b", "deshalb"),
    (r"\bdeshalb\s+also\b", "deshalb"),
)

DISCOURSE_PAIRS_EN: Tuple[Tuple[str, str], ...] = (
    (r"\btherefore\s+thus\b", "therefore"),
    (r"\bthus\s+therefore\b", "thus"),
    (r"\bthen\s+afterwards\b", "then"),
    (r"\bafterwards\s+then\b", "afterwards"),
    (r"\bso\s+therefore\b", "therefore"),
    (r"\btherefore\s+so\b", "therefore"),
)

GERMAN = Lexicon(
    language="de",
    stopwords=STOPWORDS_DE,
    common_words=COMMON_WORDS_DE,
    cities=CITIES_DE,
    first_names=FIRST_NAMES,
    pronouns=("ich", "mich", "mir", "mein", "meine", "meinen", "meiner", "meinem"),
    neutral_pronoun="man",
    discourse_pairs=DISCOURSE_PAIRS_DE,
    synonyms=SYNONYMS_DE,
    number_labels=NumberLabels(
        some="einige", several="mehrere", many="viele", time_ago="vor einiger Zeit"
    ),
)

# English texts also mention German-speaking cities, so both lists apply.
ENGLISH = Lexicon(
    language="en",
    stopwords=STOPWORDS_EN,
    common_words=COMMON_WORDS_EN,
    cities=CITIES_DE + CITIES_EN,
    first_names=FIRST_NAMES,
    pronouns=("me", "my", "myself", "mine"),
    neutral_pronoun="one",
    discourse_pairs=DISCOURSE_PAIRS_EN,
    synonyms=SYNONYMS_EN,
    number_labels=NumberLabels(
        some="some", several="several", many="many", time_ago="some time ago"
    ),
)

DEFAULT_LEXICONS: Mapping[str, Lexicon] = MappingProxyType({"de": GERMAN, "en": ENGLISH})


def get_lexicon(language: str) -> Lexicon:
    """Return the bundled lexicon for a language tag."""
    try:
        return DEFAULT_LEXICONS[language]
    except KeyError:
        raise ValueError(f"Unsupported language '{language}'.") from None
