"""
passcraft.wordlists
Read-only word pool consumed by the memorable and smart generators.
"""

from collections import abc
from typing import Dict, Iterable, Iterator, Mapping, Tuple

from .errors import EmptyWordPool


class WordPool(abc.Mapping):
    """
    Immutable mapping of category name -> ordered tuple of lowercase words.
    """

    def __init__(self, categories: Mapping[str, Iterable[str]]):
        pool: Dict[str, Tuple[str, ...]] = {}
        for name, words in categories.items():
            words = tuple(words)
            for w in words:
                if not w or not w.isalpha() or not w.islower():
                    raise ValueError(f"word pool entries must be lowercase letters: {w!r} in {name!r}")
            pool[name] = words
        self._categories = pool
        self._all = tuple(w for words in pool.values() for w in words)

    def __getitem__(self, name: str) -> Tuple[str, ...]:
        return self._categories[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def all_words(self) -> Tuple[str, ...]:
        return self._all

    def category(self, name: str) -> Tuple[str, ...]:
        return self._categories.get(name, ())

    def require(self, name: str) -> Tuple[str, ...]:
        words = self.category(name)
        if not words:
            raise EmptyWordPool(f"word pool has no words in category {name!r}")
        return words


def _unique(words: str) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(words.split()))


NOUNS = _unique("""
    apple bridge castle dragon eagle forest galaxy harbor island jungle
    knight lighthouse mountain ocean palace quartz river sunset tower universe
    village waterfall crystal phoenix thunder meadow comet pyramid volcano wizard
    butterfly diamond elephant falcon giraffe horizon iceberg jaguar kangaroo leopard
    moonlight nebula orchard panther rainbow sapphire tornado umbrella valley whisper
    anchor beacon compass dolphin emerald firefly glacier hamster iguana jackal
    keystone lavender magnet nautilus ocelot penguin quasar rabbit starfish turtle
    unicorn violet whale xenon yacht zebra amber bronze copper desert
    eclipse fountain garden hammer iodine jasmine kiwi lemon marble nectar
    olive prism quill rose silver topaz urchin vanilla willow xylophone
    yarrow zircon acorn badger cedar daisy ember fern grape hazel
    iris jade kestrel lily mint nutmeg onyx pearl ruby
    sage tulip umber vine walnut xylem yew zinc atom blaze
    coral dune echo flame geyser heron ivory jewel kelp lotus
    mesa nova opal pine reef storm thyme vortex
""")

ADJECTIVES = _unique("""
    brave clever daring elegant fierce gentle heroic infinite joyful keen
    loyal mighty noble radiant swift vibrant wise zealous bright calm
    divine eternal faithful golden humble intense jovial kind luminous mystic
    nimble peaceful quick robust serene triumphant unique valiant wonderful xenial
    abundant brilliant cosmic dazzling electric fantastic graceful harmonic inspiring jaunty
    kinetic lively magnetic optimistic pristine quantum resilient spectacular tranquil
    ultimate vivacious wondrous exotic youthful zestful artful bold creative dynamic
    efficient fluid genuine honest ideal jubilant lovely majestic natural
    organic perfect quiet refined smooth timeless uplifting vital warm excellent
    yearning zonal ancient blessed cheerful delicate endless fresh glorious happy
    immense joyous lasting marvelous outstanding precious
    stunning upbeat wholesome extraordinary amazing beautiful
    charming delightful energetic fabulous glowing harmonious incredible kaleidoscopic luminescent
    magnificent nurturing passionate quixotic spirited thriving vivid
    whimsical exuberant adventurous blissful curious determined enthusiastic fearless
""")

VERBS = _unique("""
    achieve build create discover explore flourish grow inspire journey kindle
    learn master navigate overcome pursue question rise soar thrive unite
    venture wander excel bloom conquer dream evolve forge gleam heal
    illuminate jump launch manifest nurture observe prosper quest radiate
    sparkle transform unleash visualize witness expand yield zoom ascend balance
    celebrate dance embrace flow generate harmonize ignite join liberate
    motivate nourish optimize pioneer quicken rejuvenate strengthen transcend uplift validate
    welcome yearn zap amplify boost cultivate develop energize focus
    guide harness innovate jolt kickstart leverage multiply narrow open polish
    qualify refine streamline target upgrade value win yell zero
    accelerate breakthrough captivate deliver enhance fuel galvanize heighten implement
    keep lead maximize network orchestrate power revolutionize synchronize turbocharge
    understand work activate brighten clarify demonstrate
    educate facilitate grasp handle impact justify locate measure obtain
    plan quote respond support track update verify weigh examine
""")

NATURE_WORDS = _unique("""
    aurora breeze cascade dewdrop eclipse frost glacier horizon island jungle
    lagoon meadow nectar oasis petal quartz ravine stream tundra valley
    waterfall zenith bark coral dune ember fern grove heath inlet
""")

TECHNOLOGY_WORDS = _unique("""
    algorithm binary circuit database ethernet firewall gigabyte hardware interface javascript
    kernel laptop modem network operating protocol quantum router software terminal
    upload virtual wireless pixel matrix server coding digital encrypt fiber
""")

COSMIC_WORDS = _unique("""
    asteroid blackhole constellation dimension eclipse fusion galaxy hydrogen infinity jupiter
    kinetic lunar meteor nebula orbit pulsar quasar radiation satellite telescope
    universe vacuum wormhole xenon year zodiac comet plasma solar cosmic
""")

MYTHICAL_WORDS = _unique("""
    atlantis basilisk centaur dragon elixir fairy griffin hydra immortal jinn
    kraken legend minotaur nymph oracle phoenix quest rune sphinx titan
    unicorn valkyrie wizard xerus yeti zeus amulet banshee chimera deity
""")

DEFAULT_WORD_POOL = WordPool({
    "nouns": NOUNS,
    "adjectives": ADJECTIVES,
    "verbs": VERBS,
    "nature": NATURE_WORDS,
    "technology": TECHNOLOGY_WORDS,
    "cosmic": COSMIC_WORDS,
    "mythical": MYTHICAL_WORDS,
})


def capitalize(word: str) -> str:
    """Upper-case the first letter only ('quick' -> 'Quick')."""
    return word[:1].upper() + word[1:]
