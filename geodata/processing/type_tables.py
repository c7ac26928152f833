"""Static subdivision-type tables used to pick the addressing level per country.

Type labels are the iso-codes ``type`` values as exposed by pycountry.
Nothing here is mutated at runtime.
"""
from types import MappingProxyType

# Subdivision types used in postal addresses, per ISO 3166-1 alpha-2 code.
_SHIPPING_TYPES = {
    # Europe
    "AT": ("State",),
    "BE": ("Province", "Region"),
    "BG": ("District",),
    "CH": ("Canton",),
    "CZ": ("Region", "Capital city"),
    "DE": ("Land",),
    "DK": ("Region",),
    "EE": ("County",),
    "ES": ("Province", "Autonomous city in north africa"),
    "FI": ("Region",),
    "FR": (
        "Metropolitan department",
        "Overseas departmental collectivity",
        "Overseas unique territorial collectivity",
        "European collectivity",
        "Metropolitan collectivity with special status",
    ),
    "GB": (
        "Two-tier county",
        "Unitary authority",
        "Metropolitan district",
        "London borough",
        "City corporation",
        "Council area",
        "District",
    ),
    "GR": ("Administrative region", "Self-governed part"),
    "HR": ("County", "City"),
    "HU": ("County", "Capital city"),
    "IE": ("County",),
    "IT": (
        "Province",
        "Metropolitan city",
        "Free municipal consortium",
        "Autonomous province",
        "Decentralized regional entity",
    ),
    "LT": ("County",),
    "LV": ("Municipality", "State city"),
    "NL": ("Province",),
    "NO": ("County",),
    "PL": ("Voivodship",),
    "PT": ("District", "Autonomous region"),
    "RO": ("Department", "Municipality"),
    "RS": ("District", "City", "Autonomous province"),
    "RU": (
        "Republic",
        "Administrative region",
        "Autonomous city",
        "Autonomous district",
        "Autonomous region",
    ),
    "SE": ("County",),
    "SI": ("Municipality", "Urban municipality"),
    "SK": ("Region",),
    "TR": ("Province",),
    "UA": ("Region", "Republic", "City"),
    # Americas
    "AR": ("Province", "City"),
    "BO": ("Department",),
    "BR": ("State", "Federal district"),
    "CA": ("Province", "Territory"),
    "CL": ("Region",),
    "CO": ("Department", "Capital district"),
    "CR": ("Province",),
    "EC": ("Province",),
    "GT": ("Department",),
    "MX": ("State", "Federal entity"),
    "PE": ("Region", "Municipality"),
    "PY": ("Department", "Capital"),
    "US": ("State", "District", "Outlying area"),
    "UY": ("Department",),
    "VE": ("State", "Capital district", "Federal dependency"),
    # Asia / Pacific
    "AU": ("State", "Territory"),
    "BD": ("District",),
    "CN": ("Province", "Municipality", "Autonomous region", "Special administrative region"),
    "ID": ("Province",),
    "IN": ("State", "Union territory"),
    "JP": ("Prefecture",),
    "KR": (
        "Province",
        "Metropolitan city",
        "Special city",
        "Special self-governing province",
        "Special self-governing city",
    ),
    "KZ": ("Region", "City"),
    "MY": ("State", "Federal territory"),
    "NZ": ("Region", "Special island authority"),
    "PH": ("Province",),
    "PK": ("Province", "Federal capital territory", "Pakistan administered area"),
    "TH": ("Province", "Metropolitan administration", "Special administrative city"),
    "TW": ("County", "City", "Special municipality"),
    "VN": ("Province", "Municipality"),
    # Africa / Middle East
    "AE": ("Emirate",),
    "EG": ("Governorate",),
    "IL": ("District",),
    "KE": ("County",),
    "MA": ("Province", "Prefecture"),
    "NG": ("State", "Capital territory"),
    "SA": ("Region",),
    "ZA": ("Province",),
}

SHIPPING_TYPES = MappingProxyType(_SHIPPING_TYPES)

# Most general first. Types not listed rank as most specific.
TYPE_RANKING = (
    "Country",
    "Nation",
    "Geographical region",
    "Region",
    "Autonomous region",
    "Autonomous community",
    "State",
    "Land",
    "Province",
    "Autonomous province",
    "Canton",
    "Prefecture",
    "Voivodship",
    "Governorate",
    "Emirate",
    "Department",
    "County",
    "District",
    "Municipality",
    "City",
    "Commune",
    "Parish",
)

# Too coarse to be used as the address region
GENERAL_TYPES = frozenset(
    {
        "Country",
        "Nation",
        "Geographical region",
        "Geographical unit",
        "Geographical entity",
    }
)

# Too fine-grained to be used as the address region
SPECIFIC_TYPES = frozenset(
    {
        "Municipality",
        "Urban municipality",
        "City",
        "Town",
        "Commune",
        "Parish",
        "Borough",
        "Ward",
        "Village",
    }
)
