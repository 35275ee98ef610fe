from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from create_eth_app.errors import FrameworkNotFoundError, TemplateNotFoundError

# Rendered from `<path>.hbs` in the app root with `<path>.context` from the
# downloaded template.
STANDARD_FILES: tuple[str, ...] = (
    "package.json",
    "packages/contracts/package.json",
    "packages/contracts/README.md",
    "packages/contracts/src/index.js",
    "packages/react-app/package.json",
    "packages/react-app/README.md",
    "packages/react-app/src/index.js",
    "packages/react-app/src/App.js",
)

_COMPOUND_ABIS = (
    "base0bps_Slope2000bps",
    "base200bps_Slope222bps_Kink90_Jump10",
    "base200bps_Slope3000bps",
    "base500bps_Slope1200bps",
    "cBAT",
    "cDAI",
    "cETH",
    "COMP",
    "comptroller",
    "cREP",
    "cSAI",
    "cTBTC",
    "cUSDC",
    "cWBTC",
    "cZRX",
    "daiRateModel",
    "governance",
    "priceOracle",
    "timelock",
)

# Copied verbatim from the downloaded template, never rendered.
BESPOKE_FILES: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "react": MappingProxyType(
            {
                "compound": (
                    "packages/contracts/src/abis.js",
                    "packages/contracts/src/addresses.js",
                    *(f"packages/contracts/src/abis/{abi}.json" for abi in _COMPOUND_ABIS),
                ),
            }
        ),
    }
)


def frameworks() -> tuple[str, ...]:
    return tuple(BESPOKE_FILES)


def templates_for(framework: str) -> tuple[str, ...]:
    if framework not in BESPOKE_FILES:
        raise FrameworkNotFoundError(framework)
    return tuple(BESPOKE_FILES[framework])


def bespoke_files_for(framework: str, template: str) -> tuple[str, ...]:
    """Return the bespoke files of a framework/template pair.

    Raises FrameworkNotFoundError or TemplateNotFoundError when the pair is not
    registered. An unknown key is never treated as an empty list.
    """
    templates = BESPOKE_FILES.get(framework)
    if templates is None:
        raise FrameworkNotFoundError(framework)
    files = templates.get(template)
    if files is None:
        raise TemplateNotFoundError(template, framework=framework)
    return files
