import pytest

from sharutils.parser import OptionCatalog, OptionDefinition


def reject_empty(value: str) -> None:
    if not value:
        raise ValueError("value must not be empty")


@pytest.fixture
def catalog():
    return OptionCatalog(
        [
            OptionDefinition("h", "help", help="Display usage information and exit"),
            OptionDefinition("m", "base64", help="Use base64"),
            OptionDefinition("f", "file", takes_value=True, help="Input file"),
            OptionDefinition(
                "o",
                "output",
                takes_value=True,
                default="default.txt",
                help="Output file",
            ),
            OptionDefinition(
                "n",
                "name",
                takes_value=True,
                validator=reject_empty,
                help="Name to record",
            ),
        ]
    )
