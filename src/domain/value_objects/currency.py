"""
Value Object pour les devises.
"""

from enum import Enum


# Symboles des devises acceptees
CURRENCY_SYMBOLS = {
    "EUR": "€",  # Euro
    "USD": "$",
    "UAH": "₴",  # Hryvnia
}


class Currency(Enum):
    """
    Devise d'un prix d'annonce (code ISO 4217).

    Example:
        >>> Currency.from_string("eur")
        <Currency.EUR: 'EUR'>
        >>> Currency.EUR.format(99.99)
        '99.99 €'
    """

    EUR = "EUR"
    USD = "USD"
    UAH = "UAH"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "Currency":
        """
        Cree une Currency depuis un code ou un symbole.

        Raises:
            ValueError: Si la devise n'est pas supportee.
        """
        if not isinstance(value, str) or not value:
            raise ValueError(f"Devise invalide: {value!r}")

        value = value.strip().upper()

        # Verifier si c'est un symbole
        for code, symbol in CURRENCY_SYMBOLS.items():
            if value == symbol:
                return cls(code)

        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Devise non supportee: {value}")

    @property
    def symbol(self) -> str:
        """Symbole de la devise."""
        return CURRENCY_SYMBOLS[self.value]

    def format(self, amount: float) -> str:
        """Formate un montant avec le symbole."""
        return f"{amount:.2f} {self.symbol}"
