"""
Capability keys and the per-language component bundle.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterator, Mapping, Type, TypeVar

from interfaces.ilanguage_components import IStemmer, IStopwordFilter, ITokenizer

T = TypeVar('T')

CapabilityFactory = Callable[[], Any]


@dataclass(frozen=True)
class CapabilityKey(Generic[T]):
    """
    Identifies one kind of language-analysis capability.

    The key carries the interface its factory produces, so a lookup through
    ``LanguageComponents.get`` yields an instance of that interface.
    """

    name: str
    interface: Type[T]

    def __str__(self) -> str:
        return self.name


TOKENIZER: CapabilityKey[ITokenizer] = CapabilityKey("tokenizer", ITokenizer)
STEMMER: CapabilityKey[IStemmer] = CapabilityKey("stemmer", IStemmer)
STOPWORDS: CapabilityKey[IStopwordFilter] = CapabilityKey("stopwords", IStopwordFilter)


class LanguageComponents:
    """Immutable bundle of capability factories assembled for one language."""

    def __init__(self, language: str, factories: Mapping[CapabilityKey, CapabilityFactory]):
        self._language = language
        self._factories = MappingProxyType(dict(factories))

    @property
    def language(self) -> str:
        return self._language

    def keys(self):
        return self._factories.keys()

    def has(self, key: CapabilityKey) -> bool:
        return key in self._factories

    def factory(self, key: CapabilityKey[T]) -> Callable[[], T]:
        return self._factories[key]

    def get(self, key: CapabilityKey[T]) -> T:
        """
        Construct a fresh capability instance.

        Raises:
            KeyError: If no provider contributed this capability
        """
        return self._factories[key]()

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __iter__(self) -> Iterator[CapabilityKey]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        names = ", ".join(str(k) for k in self._factories)
        return f"LanguageComponents(language={self._language!r}, components=[{names}])"
