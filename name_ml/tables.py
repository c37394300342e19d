"""Fixed lookup tables: US states, language codes and nationalities.

Lookups are pure functions over module-level mappings that are never
modified.

Example:
    >>> unabbreviate_us_state("CA")
    'California'
    >>> language_for_code("DE")
    'German'
    >>> nation_for_nationality("Swiss")
    'Switzerland'
"""
from types import MappingProxyType
from typing import Mapping, Optional


US_STATES: Mapping[str, str] = MappingProxyType({
    "AL": "Alabama", "AK": "Alaska", "AS": "American Samoa", "AZ": "Arizona",
    "AR": "Arkansas", "CA": "California", "CALIF": "California", "CO": "Colorado",
    "CT": "Connecticut", "DE": "Delaware", "DC": "District of Columbia",
    "FM": "Federated States of Micronesia", "FL": "Florida", "GA": "Georgia",
    "GU": "Guam", "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois", "IN": "Indiana",
    "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine",
    "MH": "Marshall Islands", "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan",
    "MN": "Minnesota", "MS": "Mississippi", "MO": "Missouri", "MT": "Montana",
    "NE": "Nebraska", "NV": "Nevada", "NH": "New Hampshire", "NJ": "New Jersey",
    "NM": "New Mexico", "NY": "New York", "NC": "North Carolina", "ND": "North Dakota",
    "MP": "Northern Mariana Islands", "OH": "Ohio", "OK": "Oklahoma", "OR": "Oregon",
    "PW": "Palau", "PA": "Pennsylvania", "PR": "Puerto Rico", "RI": "Rhode Island",
    "SC": "South Carolina", "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas",
    "UT": "Utah", "VT": "Vermont", "VI": "Virgin Islands", "VA": "Virginia",
    "WA": "Washington", "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
})

# ISO 639-1 codes
LANGUAGE_CODES: Mapping[str, str] = MappingProxyType({
    "aa": "Afar", "ab": "Abkhazian", "ae": "Avestan", "af": "Afrikaans", "ak": "Akan",
    "am": "Amharic", "an": "Aragonese", "ar": "Arabic", "as": "Assamese", "av": "Avaric",
    "ay": "Aymara", "az": "Azerbaijani", "ba": "Bashkir", "be": "Belarusian",
    "bg": "Bulgarian", "bh": "Bihari", "bi": "Bislama", "bm": "Bambara", "bn": "Bengali",
    "bo": "Tibetan", "br": "Breton", "bs": "Bosnian", "ca": "Catalan", "ce": "Chechen",
    "ch": "Chamorro", "co": "Corsican", "cr": "Cree", "cs": "Czech", "cu": "Church",
    "cv": "Chuvash", "cy": "Welsh", "da": "Danish", "de": "German", "dv": "Divehi",
    "dz": "Dzongkha", "ee": "Ewe", "el": "Greek", "en": "English", "eo": "Esperanto",
    "es": "Spanish", "et": "Estonian", "eu": "Basque", "fa": "Persian", "ff": "Fulah",
    "fi": "Finnish", "fj": "Fijian", "fo": "Faroese", "fr": "French",
    "fy": "Western Frisian", "ga": "Irish", "gd": "Scottish", "gl": "Galician",
    "gn": "Guaraní", "gu": "Gujarati", "gv": "Manx", "ha": "Hausa", "he": "Hebrew",
    "hi": "Hindi", "ho": "Hiri", "hr": "Croatian", "ht": "Haitian", "hu": "Hungarian",
    "hy": "Armenian", "hz": "Herero", "ia": "Interlingua", "id": "Indonesian",
    "ie": "Interlingue", "ig": "Igbo", "ii": "Sichuan", "ik": "Inupiaq", "io": "Ido",
    "is": "Icelandic", "it": "Italian", "iu": "Inuktitut", "ja": "Japanese",
    "jv": "Javanese", "ka": "Georgian", "kg": "Kongo", "ki": "Kikuyu", "kj": "Kwanyama",
    "kk": "Kazakh", "kl": "Kalaallisut", "km": "Khmer", "kn": "Kannada", "ko": "Korean",
    "kr": "Kanuri", "ks": "Kashmiri", "ku": "Kurdish", "kv": "Komi", "kw": "Cornish",
    "ky": "Kirghiz", "la": "Latin", "lb": "Luxembourgish", "lg": "Ganda",
    "li": "Limburgish", "ln": "Lingala", "lo": "Lao", "lt": "Lithuanian",
    "lu": "Luba-Katanga", "lv": "Latvian", "mg": "Malagasy", "mh": "Marshallese",
    "mi": "Maori", "mk": "Macedonian", "ml": "Malayalam", "mn": "Mongolian",
    "mo": "Moldavian", "mr": "Marathi", "ms": "Malay", "mt": "Maltese", "my": "Burmese",
    "na": "Nauru", "nb": "Norwegian", "nd": "North", "ne": "Nepali", "ng": "Ndonga",
    "nl": "Dutch", "nn": "Norwegian", "no": "Norwegian", "nr": "South", "nv": "Navajo",
    "ny": "Chichewa", "oc": "Occitan", "oj": "Ojibwa", "om": "Oromo", "or": "Oriya",
    "os": "Ossetian", "pa": "Panjabi", "pi": "Pali", "pl": "Polish", "ps": "Pashto",
    "pt": "Portuguese", "qu": "Quechua", "rm": "Raeto-Romance", "rn": "Kirundi",
    "ro": "Romanian", "ru": "Russian", "rw": "Kinyarwanda", "ry": "Rusyn",
    "sa": "Sanskrit", "sc": "Sardinian", "sd": "Sindhi", "se": "Northern", "sg": "Sango",
    "sh": "Serbo-Croatian", "si": "Sinhalese", "sk": "Slovak", "sl": "Slovenian",
    "sm": "Samoan", "sn": "Shona", "so": "Somali", "sq": "Albanian", "sr": "Serbian",
    "ss": "Swati", "st": "Sotho", "su": "Sundanese", "sv": "Swedish", "sw": "Swahili",
    "ta": "Tamil", "te": "Telugu", "tg": "Tajik", "th": "Thai", "ti": "Tigrinya",
    "tk": "Turkmen", "tl": "Tagalog", "tn": "Tswana", "to": "Tonga", "tr": "Turkish",
    "ts": "Tsonga", "tt": "Tatar", "tw": "Twi", "ty": "Tahitian", "ug": "Uighur",
    "uk": "Ukrainian", "ur": "Urdu", "uz": "Uzbek", "ve": "Venda", "vi": "Vietnamese",
    "vo": "Volapük", "wa": "Walloon", "wo": "Wolof", "xh": "Xhosa", "yi": "Yiddish",
    "yo": "Yoruba", "za": "Zhuang", "zh": "Chinese", "zu": "Zulu",
})

NATIONALITY_TO_COUNTRY: Mapping[str, str] = MappingProxyType({
    # Continents and regions
    "African": "Africa", "Antarctic": "Antarctica", "Americana": "Americas",
    "Asian": "Asia", "Middle Eastern": "Middle East", "Australasian": "Australasia",
    "Australian": "Australia", "Eurasian": "Eurasia", "European": "Europe",
    "North American": "North America", "Oceanian": "Oceania",
    "South American": "South America",
    # Countries and territories
    "Afghan": "Afghanistan", "Albanian": "Albania", "Algerian": "Algeria",
    "American Samoan": "American Samoa", "Andorran": "Andorra", "Angolan": "Angola",
    "Anguillan": "Anguilla", "Antiguan": "Antigua and Barbuda", "Argentine": "Argentina",
    "Argentinean": "Argentina", "Argentinian": "Argentina", "Armenian": "Armenia",
    "Aruban": "Aruba", "Austrian": "Austria", "Azerbaijani": "Azerbaijan",
    "Azeri": "Azerbaijan", "Bahamian": "Bahamas", "Bahraini": "Bahrain",
    "Bangladeshi": "Bangladesh", "Barbadian": "Barbados", "Bajan": "Barbados",
    "Belarusian": "Belarus", "Belgian": "Belgium", "Belizean": "Belize",
    "Beninese": "Benin", "Bermudian": "Bermuda", "Bermudan": "Bermuda",
    "Bhutanese": "Bhutan", "Bolivian": "Bolivia", "Bosnian": "Bosnia and Herzegovina",
    "Bosniak": "Bosnia and Herzegovina", "Herzegovinian": "Bosnia and Herzegovina",
    "Botswanan": "Botswana", "Brazilian": "Brazil",
    "British Virgin Island": "British Virgin Islands", "Bruneian": "Brunei",
    "Bulgarian": "Bulgaria", "Burkinabe": "Burkina Faso", "Burmese": "Burma",
    "Burundian": "Burundi", "Cambodian": "Cambodia", "Cameroonian": "Cameroon",
    "Canadian": "Canada", "Cape Verdean": "Cape Verde", "Caymanian": "Cayman Islands",
    "Central African": "Central African Republic", "Chadian": "Chad",
    "Chilean": "Chile", "Chinese": "People's Republic of China",
    "Christmas Island": "Christmas Island", "Cocos Island": "Cocos (Keeling) Islands",
    "Colombian": "Colombia", "Comorian": "Comoros",
    "Congolese": "Democratic Republic of the Congo", "Cook Island": "Cook Islands",
    "Costa Rican": "Costa Rica", "Ivorian": "Côte d'Ivoire", "Croatian": "Croatia",
    "Cuban": "Cuba", "Cypriot": "Cyprus", "Czech": "Czech Republic", "Danish": "Denmark",
    "Djiboutian": "Djibouti", "Dominican": "Dominican Republic", "Timorese": "East Timor",
    "Ecuadorian": "Ecuador", "Egyptian": "Egypt", "Salvadoran": "El Salvador",
    "English": "England", "Equatorial Guinean": "Equatorial Guinea",
    "Eritrean": "Eritrea", "Estonian": "Estonia", "Ethiopian": "Ethiopia",
    "Falkland Island": "Falkland Islands", "Faroese": "Faroe Islands", "Fijian": "Fiji",
    "Finnish": "Finland", "French": "France", "French Guianese": "French Guiana",
    "French Polynesian": "French Polynesia", "Gabonese": "Gabon", "Gambian": "Gambia",
    "Georgian": "Georgia", "German": "Germany", "Ghanaian": "Ghana",
    "Gibraltar": "Gibraltar", "Greek": "Greece", "Greenlandic": "Greenland",
    "Grenadian": "Grenada", "Guadeloupe": "Guadeloupe", "Guamanian": "Guam",
    "Guatemalan": "Guatemala", "Guinean": "Guinea", "Guyanese": "Guyana",
    "Haitian": "Haiti", "Honduran": "Honduras", "Hong Kong": "Hong Kong",
    "Hungarian": "Hungary", "Icelandic": "Iceland", "Indian": "India",
    "Indonesian": "Indonesia", "Iranian": "Iran", "Iraqi": "Iraq", "Manx": "Isle of Man",
    "Israeli": "Israel", "Italian": "Italy", "Jamaican": "Jamaica", "Japanese": "Japan",
    "Jordanian": "Jordan", "Kazakhstani": "Kazakhstan", "Kenyan": "Kenya",
    "I-Kiribati": "Kiribati", "North Korean": "North Korea", "South Korean": "South Korea",
    "Kosovar": "Kosovo", "Kuwaiti": "Kuwait", "Kyrgyzstani": "Kyrgyzstan",
    "Laotian": "Laos", "Latvian": "Latvia", "Lebanese": "Lebanon", "Basotho": "Lesotho",
    "Liberian": "Liberia", "Libyan": "Libya", "Liechtenstein": "Liechtenstein",
    "Lithuanian": "Lithuania", "Luxembourg": "Luxembourg", "Macanese": "Macau",
    "Macedonian": "Republic of Macedonia", "Malagasy": "Madagascar",
    "Malawian": "Malawi", "Malaysian": "Malaysia", "Maldivian": "Maldives",
    "Malian": "Mali", "Maltese": "Malta", "Marshallese": "Marshall Islands",
    "Martiniquais": "Martinique", "Mauritanian": "Mauritania", "Mauritian": "Mauritius",
    "Mahoran": "Mayotte", "Mexican": "Mexico", "Micronesian": "Micronesia",
    "Moldovan": "Moldova", "Monégasque": "Monaco", "Mongolian": "Mongolia",
    "Montenegrin": "Montenegro", "Montserratian": "Montserrat", "Moroccan": "Morocco",
    "Mozambican": "Mozambique", "Namibian": "Namibia", "Nauruan": "Nauru",
    "Nepali": "Nepal", "Dutch": "Netherlands", "Dutch Antillean": "Netherlands Antilles",
    "New Caledonian": "New Caledonia", "New Zealand": "New Zealand",
    "Nicaraguan": "Nicaragua", "Niuean": "Niue", "Nigerien": "Niger",
    "Nigerian": "Nigeria", "Norwegian": "Norway", "Northern Irish": "Northern Ireland",
    "Northern Marianan": "Northern Marianas", "Omani": "Oman", "Pakistani": "Pakistan",
    "Palestinian": "Palestinian territories", "Palauan": "Palau",
    "Panamanian": "Panama", "Papua New Guinean": "Papua New Guinea",
    "Paraguayan": "Paraguay", "Peruvian": "Peru", "Philippine": "Philippines",
    "Filipino": "Philippines", "Pitcairn Island": "Pitcairn Island", "Polish": "Poland",
    "Portuguese": "Portugal", "Puerto Rican": "Puerto Rico", "Qatari": "Qatar",
    "Irish": "Republic of Ireland", "Réunionese": "Réunion", "Romanian": "Romania",
    "Russian": "Russia", "Rwandan": "Rwanda", "St. Helenian": "St. Helena",
    "Kittitian": "St. Kitts and Nevis", "St. Lucian": "St. Lucia",
    "Saint-Pierrais": "Saint-Pierre and Miquelon",
    "St. Vincentian": "St. Vincent and the Grenadines", "Samoan": "Samoa",
    "Sammarinese": "San Marino", "São Toméan": "São Tomé and Príncipe",
    "Saudi": "Saudi Arabia", "Scottish": "Scotland", "Senegalese": "Senegal",
    "Serbian": "Serbia", "Seychellois": "Seychelles", "Sierra Leonean": "Sierra Leone",
    "Singaporean": "Singapore", "Slovak": "Slovakia", "Slovene": "Slovenia",
    "Slovenian": "Slovenia", "Solomon Island": "Solomon Islands", "Somali": "Somalia",
    "Somaliland": "Somaliland", "South African": "South Africa", "Spanish": "Spain",
    "Sri Lankan": "Sri Lanka", "Sudanese": "Sudan", "Surinamese": "Surinam",
    "Swazi": "Swaziland", "Swedish": "Sweden", "Swiss": "Switzerland",
    "Syrian": "Syria", "Taiwanese": "Taiwan", "Tajikistani": "Tajikistan",
    "Tanzanian": "Tanzania", "Thai": "Thailand", "Togolese": "Togo", "Tongan": "Tonga",
    "Trinidadian": "Trinidad and Tobago", "Tunisian": "Tunisia", "Turkish": "Turkey",
    "Turkmen": "Turkmenistan", "Tuvaluan": "Tuvalu", "Ugandan": "Uganda",
    "Ukrainian": "Ukraine", "Emirati": "United Arab Emirates", "British": "United Kingdom",
    "American": "United States of America", "Uruguayan": "Uruguay",
    "Uzbekistani": "Uzbekistan", "Uzbek": "Uzbekistan", "Vanuatuan": "Vanuatu",
    "Venezuelan": "Venezuela", "Vietnamese": "Vietnam", "Virgin Island": "Virgin Islands",
    "Welsh": "Wales", "Wallisian": "Wallis and Futuna", "Sahrawi": "Western Sahara",
    "Yemeni": "Yemen", "Zambian": "Zambia", "Zimbabwean": "Zimbabwe",
})

_US_STATE_NAMES = frozenset(US_STATES.values())
_LANGUAGE_NAMES = frozenset(LANGUAGE_CODES.values())
_COUNTRIES = frozenset(NATIONALITY_TO_COUNTRY.values())


def _strip_period(text: str) -> str:
    return text[:-1] if text.endswith(".") else text


def is_us_state(text: str) -> bool:
    """True for full US state names; underscores are read as blanks."""
    return text.replace("_", " ") in _US_STATE_NAMES


def is_us_state_abbreviation(text: str) -> bool:
    """True for US state abbreviations such as "CA" or "Calif."."""
    return _strip_period(text).upper() in US_STATES


def unabbreviate_us_state(text: str) -> Optional[str]:
    """The US state for an abbreviation, or None."""
    return US_STATES.get(_strip_period(text).upper())


def is_language(text: str) -> bool:
    """True for English language names; the first letter is upcased first."""
    return text[:1].upper() + text[1:] in _LANGUAGE_NAMES


def is_language_code(text: str) -> bool:
    return text.lower() in LANGUAGE_CODES


def language_for_code(text: str) -> Optional[str]:
    """The language for an ISO 639-1 code, or None."""
    return LANGUAGE_CODES.get(text.lower())


def is_nation(text: str) -> bool:
    return text in _COUNTRIES


def is_nationality(text: str) -> bool:
    return text in NATIONALITY_TO_COUNTRY


def nation_for_nationality(text: str) -> Optional[str]:
    """The country for a nationality adjective (e.g. "Swiss"), or None."""
    return NATIONALITY_TO_COUNTRY.get(text)
