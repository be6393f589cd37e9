"""
Translator interface - the capability the gap filler depends on
"""

from typing import Protocol


class Translator(Protocol):
    """
    Translate text into a target locale.

    Implementations raise TranslationError for any API-level problem
    (auth, quota, network) on a single call.
    """

    def translate(self, text: str, target_locale: str) -> str:
        ...


class EchoTranslator:
    """
    Offline translator that returns a formatted marker instead of calling an API.

    Usage:
        translator = EchoTranslator()
        translator.translate("Hello", "fr")   # "[fr] Hello"
    """

    def __init__(self, template: str = "[{locale}] {text}"):
        self.template = template

    def translate(self, text: str, target_locale: str) -> str:
        return self.template.format(locale=target_locale, text=text)
