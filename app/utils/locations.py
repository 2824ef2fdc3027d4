"""District and region lookup table for request locations."""

import typing as t

LOCATION_SEPARATOR: str = " - "

REGIONS: t.Dict[str, t.List[str]] = {
    "Gampaha": [
        "Negombo", "Gampaha City", "Kelaniya", "Wattala", "Ja-Ela",
        "Minuwangoda", "Mirigama", "Attanagalla", "Divulapitiya", "Mahara",
        "Dompe", "Biyagama",
    ],
    "Colombo": [
        "Colombo Fort", "Pettah", "Borella", "Cinnamon Gardens", "Maradana",
        "Havelock Town", "Wellawatte", "Dehiwala", "Mount Lavinia",
        "Moratuwa", "Kotte", "Battaramulla", "Nugegoda", "Maharagama",
        "Homagama", "Avissawella", "Kolonnawa", "Kaduwela", "Kesbewa",
        "Padukka",
    ],
    "Puttalam": [
        "Puttalam Town", "Chilaw", "Nattandiya", "Wennappuwa", "Mahawewa",
        "Anamaduwa", "Kalpitiya", "Mundel", "Dankotuwa", "Karuwalagaswewa",
        "Nawagattegama", "Vanathavilluwa",
    ],
    "Mannar": [
        "Mannar Town", "Nanattan", "Musali", "Madhu", "Manthai West",
    ],
    "Trincomalee": [
        "Trincomalee Town", "Kantale", "Kinniya", "Mutur", "Kuchchaveli",
        "Seruvila", "Thampalakamam", "Gomarankadawala", "Morawewa",
        "Padavi Sripura", "Verugal",
    ],
    "Batticaloa": [
        "Batticaloa", "Kattankudy", "Eravur Town", "Eravur Pattu",
        "Koralai Pattu (Valaichchenai)", "Manmunai North", "Porativu Pattu",
        "Kaluwanchikudy", "Vavunathivu",
    ],
    "Kandy": [
        "Kandy City", "Peradeniya", "Katugastota", "Gampola", "Nawalapitiya",
        "Kundasale", "Gangawata Korale", "Pathadumbara", "Udunuwara",
        "Yatinuwara", "Harispattuwa", "Teldeniya", "Digana",
    ],
    "Badulla": [
        "Badulla", "Bandarawela", "Haputale", "Mahiyanganaya", "Welimada",
        "Hali-Ela", "Ella", "Passara", "Uva Paranagama", "Soranathota",
    ],
    "Matale": [
        "Matale", "Dambulla", "Sigiriya", "Rattota", "Ukuwela", "Yatawatta",
        "Pallepola", "Naula", "Galewela", "Wilgamuwa", "Laggala-Pallegama",
    ],
    "Kurunegala": [
        "Kurunegala", "Kuliyapitiya", "Narammala", "Wariyapola",
        "Nikaweratiya", "Mawathagama", "Polgahawela", "Ibbagamuwa",
        "Pannala", "Giriulla", "Hettipola", "Bingiriya",
    ],
    "Ampara": [
        "Ampara", "Kalmunai", "Sammanthurai", "Akkaraipattu", "Pottuvil",
        "Uhana", "Damana", "Dehiattakandiya", "Padiyathalawa", "Mahaoya",
        "Addalaichenai", "Alayadivembu",
    ],
    "Rathnapura": [
        "Rathnapura", "Embilipitiya", "Balangoda", "Pelmadulla",
        "Eheliyagoda", "Kuruwita", "Nivitigala", "Imbulpe", "Godakawela",
        "Kahawatta", "Rakwana", "Weligepola",
    ],
    "Mullaitivu": [
        "Mullaitivu Town", "Puthukkudiyiruppu", "Oddusuddan", "Tunukkai",
        "Manthai East", "Welioya",
    ],
    "Killinochchi": [
        "Killinochchi Town", "Poonakary", "Karachchi", "Pachchilaipalli",
        "Kandavalai",
    ],
    "Vavuniya": [
        "Vavuniya Town", "Vavuniya South", "Vavuniya North", "Cheddikulam",
        "Venkalacheddikulam",
    ],
    "Jaffna": [
        "Jaffna Town", "Nallur", "Chavakachcheri", "Point Pedro",
        "Kankesanthurai", "Kopay", "Sandilipay", "Tellippalai", "Uduvil",
        "Chankanai", "Karainagar", "Velanai", "Kayts", "Delft",
    ],
}

DISTRICTS: t.List[str] = list(REGIONS)


def match_district(name: str | None) -> str | None:
    """Find the canonical district name, ignoring case and padding.

    Args:
        name (str | None): A district name as typed or extracted.

    Returns:
        str | None: The canonical district, or None when unknown.
    """
    if not name:
        return None
    wanted: str = name.strip().lower()
    for district in DISTRICTS:
        if district.lower() == wanted:
            return district
    return None


def match_region(district: str, name: str | None) -> str | None:
    """Find the canonical region of a district, ignoring case and padding.

    Args:
        district (str): A canonical district name.
        name (str | None): A region name as typed or extracted.

    Returns:
        str | None: The canonical region, or None when unknown.
    """
    if not name:
        return None
    wanted: str = name.strip().lower()
    for region in REGIONS.get(district, []):
        if region.lower() == wanted:
            return region
    return None


def compose_location(district: str, region: str) -> str:
    """Build the composite location key used for aggregation.

    Args:
        district (str): The district name.
        region (str): The region name within the district.

    Returns:
        str: ``"<District> - <Region>"``.
    """
    return f"{district}{LOCATION_SEPARATOR}{region}"
