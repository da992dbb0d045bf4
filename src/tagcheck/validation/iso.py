"""Reference data for the locale rules: ISO-3166 countries, ISO-4217 currencies and ISO-639 languages."""

from typing import NamedTuple


class Country(NamedTuple):
    """An officially assigned ISO-3166 country code."""
    name: str
    alpha2: str
    alpha3: str
    numeric: str


class Language(NamedTuple):
    """An ISO-639 language with its bibliographic three-letter and two-letter codes."""
    alpha3b: str
    alpha2: str
    english: str


COUNTRIES: tuple[Country, ...] = (
    Country("Afghanistan", "AF", "AFG", "004"),
    Country("Albania", "AL", "ALB", "008"),
    Country("Antarctica", "AQ", "ATA", "010"),
    Country("Algeria", "DZ", "DZA", "012"),
    Country("American Samoa", "AS", "ASM", "016"),
    Country("Andorra", "AD", "AND", "020"),
    Country("Angola", "AO", "AGO", "024"),
    Country("Antigua and Barbuda", "AG", "ATG", "028"),
    Country("Azerbaijan", "AZ", "AZE", "031"),
    Country("Argentina", "AR", "ARG", "032"),
    Country("Australia", "AU", "AUS", "036"),
    Country("Austria", "AT", "AUT", "040"),
    Country("Bahamas (the)", "BS", "BHS", "044"),
    Country("Bahrain", "BH", "BHR", "048"),
    Country("Bangladesh", "BD", "BGD", "050"),
    Country("Armenia", "AM", "ARM", "051"),
    Country("Barbados", "BB", "BRB", "052"),
    Country("Belgium", "BE", "BEL", "056"),
    Country("Bermuda", "BM", "BMU", "060"),
    Country("Bhutan", "BT", "BTN", "064"),
    Country("Bolivia (Plurinational State of)", "BO", "BOL", "068"),
    Country("Bosnia and Herzegovina", "BA", "BIH", "070"),
    Country("Botswana", "BW", "BWA", "072"),
    Country("Bouvet Island", "BV", "BVT", "074"),
    Country("Brazil", "BR", "BRA", "076"),
    Country("Belize", "BZ", "BLZ", "084"),
    Country("British Indian Ocean Territory (the)", "IO", "IOT", "086"),
    Country("Solomon Islands", "SB", "SLB", "090"),
    Country("Virgin Islands (British)", "VG", "VGB", "092"),
    Country("Brunei Darussalam", "BN", "BRN", "096"),
    Country("Bulgaria", "BG", "BGR", "100"),
    Country("Myanmar", "MM", "MMR", "104"),
    Country("Burundi", "BI", "BDI", "108"),
    Country("Belarus", "BY", "BLR", "112"),
    Country("Cambodia", "KH", "KHM", "116"),
    Country("Cameroon", "CM", "CMR", "120"),
    Country("Canada", "CA", "CAN", "124"),
    Country("Cabo Verde", "CV", "CPV", "132"),
    Country("Cayman Islands (the)", "KY", "CYM", "136"),
    Country("Central African Republic (the)", "CF", "CAF", "140"),
    Country("Sri Lanka", "LK", "LKA", "144"),
    Country("Chad", "TD", "TCD", "148"),
    Country("Chile", "CL", "CHL", "152"),
    Country("China", "CN", "CHN", "156"),
    Country("Taiwan (Province of China)", "TW", "TWN", "158"),
    Country("Christmas Island", "CX", "CXR", "162"),
    Country("Cocos (Keeling) Islands (the)", "CC", "CCK", "166"),
    Country("Colombia", "CO", "COL", "170"),
    Country("Comoros (the)", "KM", "COM", "174"),
    Country("Mayotte", "YT", "MYT", "175"),
    Country("Congo (the)", "CG", "COG", "178"),
    Country("Congo (the Democratic Republic of the)", "CD", "COD", "180"),
    Country("Cook Islands (the)", "CK", "COK", "184"),
    Country("Costa Rica", "CR", "CRI", "188"),
    Country("Croatia", "HR", "HRV", "191"),
    Country("Cuba", "CU", "CUB", "192"),
    Country("Cyprus", "CY", "CYP", "196"),
    Country("Czech Republic (the)", "CZ", "CZE", "203"),
    Country("Benin", "BJ", "BEN", "204"),
    Country("Denmark", "DK", "DNK", "208"),
    Country("Dominica", "DM", "DMA", "212"),
    Country("Dominican Republic (the)", "DO", "DOM", "214"),
    Country("Ecuador", "EC", "ECU", "218"),
    Country("El Salvador", "SV", "SLV", "222"),
    Country("Equatorial Guinea", "GQ", "GNQ", "226"),
    Country("Ethiopia", "ET", "ETH", "231"),
    Country("Eritrea", "ER", "ERI", "232"),
    Country("Estonia", "EE", "EST", "233"),
    Country("Faroe Islands (the)", "FO", "FRO", "234"),
    Country("Falkland Islands (the) [Malvinas]", "FK", "FLK", "238"),
    Country("South Georgia and the South Sandwich Islands", "GS", "SGS", "239"),
    Country("Fiji", "FJ", "FJI", "242"),
    Country("Finland", "FI", "FIN", "246"),
    Country("Åland Islands", "AX", "ALA", "248"),
    Country("France", "FR", "FRA", "250"),
    Country("French Guiana", "GF", "GUF", "254"),
    Country("French Polynesia", "PF", "PYF", "258"),
    Country("French Southern Territories (the)", "TF", "ATF", "260"),
    Country("Djibouti", "DJ", "DJI", "262"),
    Country("Gabon", "GA", "GAB", "266"),
    Country("Georgia", "GE", "GEO", "268"),
    Country("Gambia (the)", "GM", "GMB", "270"),
    Country("Palestine, State of", "PS", "PSE", "275"),
    Country("Germany", "DE", "DEU", "276"),
    Country("Ghana", "GH", "GHA", "288"),
    Country("Gibraltar", "GI", "GIB", "292"),
    Country("Kiribati", "KI", "KIR", "296"),
    Country("Greece", "GR", "GRC", "300"),
    Country("Greenland", "GL", "GRL", "304"),
    Country("Grenada", "GD", "GRD", "308"),
    Country("Guadeloupe", "GP", "GLP", "312"),
    Country("Guam", "GU", "GUM", "316"),
    Country("Guatemala", "GT", "GTM", "320"),
    Country("Guinea", "GN", "GIN", "324"),
    Country("Guyana", "GY", "GUY", "328"),
    Country("Haiti", "HT", "HTI", "332"),
    Country("Heard Island and McDonald Islands", "HM", "HMD", "334"),
    Country("Holy See (the)", "VA", "VAT", "336"),
    Country("Honduras", "HN", "HND", "340"),
    Country("Hong Kong", "HK", "HKG", "344"),
    Country("Hungary", "HU", "HUN", "348"),
    Country("Iceland", "IS", "ISL", "352"),
    Country("India", "IN", "IND", "356"),
    Country("Indonesia", "ID", "IDN", "360"),
    Country("Iran (Islamic Republic of)", "IR", "IRN", "364"),
    Country("Iraq", "IQ", "IRQ", "368"),
    Country("Ireland", "IE", "IRL", "372"),
    Country("Israel", "IL", "ISR", "376"),
    Country("Italy", "IT", "ITA", "380"),
    Country("Côte d'Ivoire", "CI", "CIV", "384"),
    Country("Jamaica", "JM", "JAM", "388"),
    Country("Japan", "JP", "JPN", "392"),
    Country("Kazakhstan", "KZ", "KAZ", "398"),
    Country("Jordan", "JO", "JOR", "400"),
    Country("Kenya", "KE", "KEN", "404"),
    Country("Korea (the Democratic People's Republic of)", "KP", "PRK", "408"),
    Country("Korea (the Republic of)", "KR", "KOR", "410"),
    Country("Kuwait", "KW", "KWT", "414"),
    Country("Kyrgyzstan", "KG", "KGZ", "417"),
    Country("Lao People's Democratic Republic (the)", "LA", "LAO", "418"),
    Country("Lebanon", "LB", "LBN", "422"),
    Country("Lesotho", "LS", "LSO", "426"),
    Country("Latvia", "LV", "LVA", "428"),
    Country("Liberia", "LR", "LBR", "430"),
    Country("Libya", "LY", "LBY", "434"),
    Country("Liechtenstein", "LI", "LIE", "438"),
    Country("Lithuania", "LT", "LTU", "440"),
    Country("Luxembourg", "LU", "LUX", "442"),
    Country("Macao", "MO", "MAC", "446"),
    Country("Madagascar", "MG", "MDG", "450"),
    Country("Malawi", "MW", "MWI", "454"),
    Country("Malaysia", "MY", "MYS", "458"),
    Country("Maldives", "MV", "MDV", "462"),
    Country("Mali", "ML", "MLI", "466"),
    Country("Malta", "MT", "MLT", "470"),
    Country("Martinique", "MQ", "MTQ", "474"),
    Country("Mauritania", "MR", "MRT", "478"),
    Country("Mauritius", "MU", "MUS", "480"),
    Country("Mexico", "MX", "MEX", "484"),
    Country("Monaco", "MC", "MCO", "492"),
    Country("Mongolia", "MN", "MNG", "496"),
    Country("Moldova (the Republic of)", "MD", "MDA", "498"),
    Country("Montenegro", "ME", "MNE", "499"),
    Country("Montserrat", "MS", "MSR", "500"),
    Country("Morocco", "MA", "MAR", "504"),
    Country("Mozambique", "MZ", "MOZ", "508"),
    Country("Oman", "OM", "OMN", "512"),
    Country("Namibia", "NA", "NAM", "516"),
    Country("Nauru", "NR", "NRU", "520"),
    Country("Nepal", "NP", "NPL", "524"),
    Country("Netherlands (the)", "NL", "NLD", "528"),
    Country("Curaçao", "CW", "CUW", "531"),
    Country("Aruba", "AW", "ABW", "533"),
    Country("Sint Maarten (Dutch part)", "SX", "SXM", "534"),
    Country("Bonaire, Sint Eustatius and Saba", "BQ", "BES", "535"),
    Country("New Caledonia", "NC", "NCL", "540"),
    Country("Vanuatu", "VU", "VUT", "548"),
    Country("New Zealand", "NZ", "NZL", "554"),
    Country("Nicaragua", "NI", "NIC", "558"),
    Country("Niger (the)", "NE", "NER", "562"),
    Country("Nigeria", "NG", "NGA", "566"),
    Country("Niue", "NU", "NIU", "570"),
    Country("Norfolk Island", "NF", "NFK", "574"),
    Country("Norway", "NO", "NOR", "578"),
    Country("Northern Mariana Islands (the)", "MP", "MNP", "580"),
    Country("United States Minor Outlying Islands (the)", "UM", "UMI", "581"),
    Country("Micronesia (Federated States of)", "FM", "FSM", "583"),
    Country("Marshall Islands (the)", "MH", "MHL", "584"),
    Country("Palau", "PW", "PLW", "585"),
    Country("Pakistan", "PK", "PAK", "586"),
    Country("Panama", "PA", "PAN", "591"),
    Country("Papua New Guinea", "PG", "PNG", "598"),
    Country("Paraguay", "PY", "PRY", "600"),
    Country("Peru", "PE", "PER", "604"),
    Country("Philippines (the)", "PH", "PHL", "608"),
    Country("Pitcairn", "PN", "PCN", "612"),
    Country("Poland", "PL", "POL", "616"),
    Country("Portugal", "PT", "PRT", "620"),
    Country("Guinea-Bissau", "GW", "GNB", "624"),
    Country("Timor-Leste", "TL", "TLS", "626"),
    Country("Puerto Rico", "PR", "PRI", "630"),
    Country("Qatar", "QA", "QAT", "634"),
    Country("Réunion", "RE", "REU", "638"),
    Country("Romania", "RO", "ROU", "642"),
    Country("Russian Federation (the)", "RU", "RUS", "643"),
    Country("Rwanda", "RW", "RWA", "646"),
    Country("Saint Barthélemy", "BL", "BLM", "652"),
    Country("Saint Helena, Ascension and Tristan da Cunha", "SH", "SHN", "654"),
    Country("Saint Kitts and Nevis", "KN", "KNA", "659"),
    Country("Anguilla", "AI", "AIA", "660"),
    Country("Saint Lucia", "LC", "LCA", "662"),
    Country("Saint Martin (French part)", "MF", "MAF", "663"),
    Country("Saint Pierre and Miquelon", "PM", "SPM", "666"),
    Country("Saint Vincent and the Grenadines", "VC", "VCT", "670"),
    Country("San Marino", "SM", "SMR", "674"),
    Country("Sao Tome and Principe", "ST", "STP", "678"),
    Country("Saudi Arabia", "SA", "SAU", "682"),
    Country("Senegal", "SN", "SEN", "686"),
    Country("Serbia", "RS", "SRB", "688"),
    Country("Seychelles", "SC", "SYC", "690"),
    Country("Sierra Leone", "SL", "SLE", "694"),
    Country("Singapore", "SG", "SGP", "702"),
    Country("Slovakia", "SK", "SVK", "703"),
    Country("Viet Nam", "VN", "VNM", "704"),
    Country("Slovenia", "SI", "SVN", "705"),
    Country("Somalia", "SO", "SOM", "706"),
    Country("South Africa", "ZA", "ZAF", "710"),
    Country("Zimbabwe", "ZW", "ZWE", "716"),
    Country("Spain", "ES", "ESP", "724"),
    Country("South Sudan", "SS", "SSD", "728"),
    Country("Sudan (the)", "SD", "SDN", "729"),
    Country("Western Sahara*", "EH", "ESH", "732"),
    Country("Suriname", "SR", "SUR", "740"),
    Country("Svalbard and Jan Mayen", "SJ", "SJM", "744"),
    Country("Swaziland", "SZ", "SWZ", "748"),
    Country("Sweden", "SE", "SWE", "752"),
    Country("Switzerland", "CH", "CHE", "756"),
    Country("Syrian Arab Republic", "SY", "SYR", "760"),
    Country("Tajikistan", "TJ", "TJK", "762"),
    Country("Thailand", "TH", "THA", "764"),
    Country("Togo", "TG", "TGO", "768"),
    Country("Tokelau", "TK", "TKL", "772"),
    Country("Tonga", "TO", "TON", "776"),
    Country("Trinidad and Tobago", "TT", "TTO", "780"),
    Country("United Arab Emirates (the)", "AE", "ARE", "784"),
    Country("Tunisia", "TN", "TUN", "788"),
    Country("Turkey", "TR", "TUR", "792"),
    Country("Turkmenistan", "TM", "TKM", "795"),
    Country("Turks and Caicos Islands (the)", "TC", "TCA", "796"),
    Country("Tuvalu", "TV", "TUV", "798"),
    Country("Uganda", "UG", "UGA", "800"),
    Country("Ukraine", "UA", "UKR", "804"),
    Country("Macedonia (the former Yugoslav Republic of)", "MK", "MKD", "807"),
    Country("Egypt", "EG", "EGY", "818"),
    Country("United Kingdom of Great Britain and Northern Ireland (the)", "GB", "GBR", "826"),
    Country("Guernsey", "GG", "GGY", "831"),
    Country("Jersey", "JE", "JEY", "832"),
    Country("Isle of Man", "IM", "IMN", "833"),
    Country("Tanzania, United Republic of", "TZ", "TZA", "834"),
    Country("United States of America (the)", "US", "USA", "840"),
    Country("Virgin Islands (U.S.)", "VI", "VIR", "850"),
    Country("Burkina Faso", "BF", "BFA", "854"),
    Country("Uruguay", "UY", "URY", "858"),
    Country("Uzbekistan", "UZ", "UZB", "860"),
    Country("Venezuela (Bolivarian Republic of)", "VE", "VEN", "862"),
    Country("Wallis and Futuna", "WF", "WLF", "876"),
    Country("Samoa", "WS", "WSM", "882"),
    Country("Yemen", "YE", "YEM", "887"),
    Country("Zambia", "ZM", "ZMB", "894"),
)


CURRENCIES: frozenset[str] = frozenset({
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
    "BAM", "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BOV", "BRL", "BSD", "BTN", "BWP", "BYN", "BZD",
    "CAD", "CDF", "CHE", "CHF", "CHW", "CLF", "CLP", "CNY", "COP", "COU", "CRC", "CUC", "CUP", "CVE", "CZK",
    "DJF", "DKK", "DOP", "DZD",
    "EGP", "ERN", "ETB", "EUR",
    "FJD", "FKP",
    "GBP", "GEL", "GHS", "GIP", "GMD", "GNF", "GTQ", "GYD",
    "HKD", "HNL", "HRK", "HTG", "HUF",
    "IDR", "ILS", "INR", "IQD", "IRR", "ISK",
    "JMD", "JOD", "JPY",
    "KES", "KGS", "KHR", "KMF", "KPW", "KRW", "KWD", "KYD", "KZT",
    "LAK", "LBP", "LKR", "LRD", "LSL", "LYD",
    "MAD", "MDL", "MGA", "MKD", "MMK", "MNT", "MOP", "MRO", "MUR", "MVR", "MWK", "MXN", "MXV", "MYR", "MZN",
    "NAD", "NGN", "NIO", "NOK", "NPR", "NZD",
    "OMR",
    "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "PYG",
    "QAR",
    "RON", "RSD", "RUB", "RWF",
    "SAR", "SBD", "SCR", "SDG", "SEK", "SGD", "SHP", "SLL", "SOS", "SRD", "SSP", "STD", "STN", "SVC", "SYP", "SZL",
    "THB", "TJS", "TMT", "TND", "TOP", "TRY", "TTD", "TWD", "TZS",
    "UAH", "UGX", "USD", "USN", "UYI", "UYU", "UYW", "UZS",
    "VEF", "VES", "VND", "VUV",
    "WST",
    "XAF", "XAG", "XAU", "XBA", "XBB", "XBC", "XBD", "XCD", "XDR", "XOF", "XPD", "XPF", "XPT", "XSU", "XTS", "XUA", "XXX",
    "YER",
    "ZAR", "ZMW", "ZWL",
})


LANGUAGES: tuple[Language, ...] = (
    Language("aar", "aa", "Afar"),
    Language("abk", "ab", "Abkhazian"),
    Language("afr", "af", "Afrikaans"),
    Language("aka", "ak", "Akan"),
    Language("alb", "sq", "Albanian"),
    Language("amh", "am", "Amharic"),
    Language("ara", "ar", "Arabic"),
    Language("arg", "an", "Aragonese"),
    Language("arm", "hy", "Armenian"),
    Language("asm", "as", "Assamese"),
    Language("ava", "av", "Avaric"),
    Language("ave", "ae", "Avestan"),
    Language("aym", "ay", "Aymara"),
    Language("aze", "az", "Azerbaijani"),
    Language("bak", "ba", "Bashkir"),
    Language("bam", "bm", "Bambara"),
    Language("baq", "eu", "Basque"),
    Language("bel", "be", "Belarusian"),
    Language("ben", "bn", "Bengali"),
    Language("bih", "bh", "Bihari languages"),
    Language("bis", "bi", "Bislama"),
    Language("bos", "bs", "Bosnian"),
    Language("bre", "br", "Breton"),
    Language("bul", "bg", "Bulgarian"),
    Language("bur", "my", "Burmese"),
    Language("cat", "ca", "Catalan; Valencian"),
    Language("cha", "ch", "Chamorro"),
    Language("che", "ce", "Chechen"),
    Language("chi", "zh", "Chinese"),
    Language("chu", "cu", "Church Slavic; Old Slavonic; Church Slavonic; Old Bulgarian; Old Church Slavonic"),
    Language("chv", "cv", "Chuvash"),
    Language("cor", "kw", "Cornish"),
    Language("cos", "co", "Corsican"),
    Language("cre", "cr", "Cree"),
    Language("cze", "cs", "Czech"),
    Language("dan", "da", "Danish"),
    Language("div", "dv", "Divehi; Dhivehi; Maldivian"),
    Language("dut", "nl", "Dutch; Flemish"),
    Language("dzo", "dz", "Dzongkha"),
    Language("eng", "en", "English"),
    Language("epo", "eo", "Esperanto"),
    Language("est", "et", "Estonian"),
    Language("ewe", "ee", "Ewe"),
    Language("fao", "fo", "Faroese"),
    Language("fij", "fj", "Fijian"),
    Language("fin", "fi", "Finnish"),
    Language("fre", "fr", "French"),
    Language("fry", "fy", "Western Frisian"),
    Language("ful", "ff", "Fulah"),
    Language("geo", "ka", "Georgian"),
    Language("ger", "de", "German"),
    Language("gla", "gd", "Gaelic; Scottish Gaelic"),
    Language("gle", "ga", "Irish"),
    Language("glg", "gl", "Galician"),
    Language("glv", "gv", "Manx"),
    Language("gre", "el", "Greek, Modern (1453-)"),
    Language("grn", "gn", "Guarani"),
    Language("guj", "gu", "Gujarati"),
    Language("hat", "ht", "Haitian; Haitian Creole"),
    Language("hau", "ha", "Hausa"),
    Language("heb", "he", "Hebrew"),
    Language("her", "hz", "Herero"),
    Language("hin", "hi", "Hindi"),
    Language("hmo", "ho", "Hiri Motu"),
    Language("hrv", "hr", "Croatian"),
    Language("hun", "hu", "Hungarian"),
    Language("ibo", "ig", "Igbo"),
    Language("ice", "is", "Icelandic"),
    Language("ido", "io", "Ido"),
    Language("iii", "ii", "Sichuan Yi; Nuosu"),
    Language("iku", "iu", "Inuktitut"),
    Language("ile", "ie", "Interlingue; Occidental"),
    Language("ina", "ia", "Interlingua (International Auxiliary Language Association)"),
    Language("ind", "id", "Indonesian"),
    Language("ipk", "ik", "Inupiaq"),
    Language("ita", "it", "Italian"),
    Language("jav", "jv", "Javanese"),
    Language("jpn", "ja", "Japanese"),
    Language("kal", "kl", "Kalaallisut; Greenlandic"),
    Language("kan", "kn", "Kannada"),
    Language("kas", "ks", "Kashmiri"),
    Language("kau", "kr", "Kanuri"),
    Language("kaz", "kk", "Kazakh"),
    Language("khm", "km", "Central Khmer"),
    Language("kik", "ki", "Kikuyu; Gikuyu"),
    Language("kin", "rw", "Kinyarwanda"),
    Language("kir", "ky", "Kirghiz; Kyrgyz"),
    Language("kom", "kv", "Komi"),
    Language("kon", "kg", "Kongo"),
    Language("kor", "ko", "Korean"),
    Language("kua", "kj", "Kuanyama; Kwanyama"),
    Language("kur", "ku", "Kurdish"),
    Language("lao", "lo", "Lao"),
    Language("lat", "la", "Latin"),
    Language("lav", "lv", "Latvian"),
    Language("lim", "li", "Limburgan; Limburger; Limburgish"),
    Language("lin", "ln", "Lingala"),
    Language("lit", "lt", "Lithuanian"),
    Language("ltz", "lb", "Luxembourgish; Letzeburgesch"),
    Language("lub", "lu", "Luba-Katanga"),
    Language("lug", "lg", "Ganda"),
    Language("mac", "mk", "Macedonian"),
    Language("mah", "mh", "Marshallese"),
    Language("mal", "ml", "Malayalam"),
    Language("mao", "mi", "Maori"),
    Language("mar", "mr", "Marathi"),
    Language("may", "ms", "Malay"),
    Language("mlg", "mg", "Malagasy"),
    Language("mlt", "mt", "Maltese"),
    Language("mon", "mn", "Mongolian"),
    Language("nau", "na", "Nauru"),
    Language("nav", "nv", "Navajo; Navaho"),
    Language("nbl", "nr", "Ndebele, South; South Ndebele"),
    Language("nde", "nd", "Ndebele, North; North Ndebele"),
    Language("ndo", "ng", "Ndonga"),
    Language("nep", "ne", "Nepali"),
    Language("nno", "nn", "Norwegian Nynorsk; Nynorsk, Norwegian"),
    Language("nob", "nb", "Bokmål, Norwegian; Norwegian Bokmål"),
    Language("nor", "no", "Norwegian"),
    Language("nya", "ny", "Chichewa; Chewa; Nyanja"),
    Language("oci", "oc", "Occitan (post 1500); Provençal"),
    Language("oji", "oj", "Ojibwa"),
    Language("ori", "or", "Oriya"),
    Language("orm", "om", "Oromo"),
    Language("oss", "os", "Ossetian; Ossetic"),
    Language("pan", "pa", "Panjabi; Punjabi"),
    Language("per", "fa", "Persian"),
    Language("pli", "pi", "Pali"),
    Language("pol", "pl", "Polish"),
    Language("por", "pt", "Portuguese"),
    Language("pus", "ps", "Pushto; Pashto"),
    Language("que", "qu", "Quechua"),
    Language("roh", "rm", "Romansh"),
    Language("rum", "ro", "Romanian; Moldavian; Moldovan"),
    Language("run", "rn", "Rundi"),
    Language("rus", "ru", "Russian"),
    Language("sag", "sg", "Sango"),
    Language("san", "sa", "Sanskrit"),
    Language("sin", "si", "Sinhala; Sinhalese"),
    Language("slo", "sk", "Slovak"),
    Language("slv", "sl", "Slovenian"),
    Language("sme", "se", "Northern Sami"),
    Language("smo", "sm", "Samoan"),
    Language("sna", "sn", "Shona"),
    Language("snd", "sd", "Sindhi"),
    Language("som", "so", "Somali"),
    Language("sot", "st", "Sotho, Southern"),
    Language("spa", "es", "Spanish; Castilian"),
    Language("srd", "sc", "Sardinian"),
    Language("srp", "sr", "Serbian"),
    Language("ssw", "ss", "Swati"),
    Language("sun", "su", "Sundanese"),
    Language("swa", "sw", "Swahili"),
    Language("swe", "sv", "Swedish"),
    Language("tah", "ty", "Tahitian"),
    Language("tam", "ta", "Tamil"),
    Language("tat", "tt", "Tatar"),
    Language("tel", "te", "Telugu"),
    Language("tgk", "tg", "Tajik"),
    Language("tgl", "tl", "Tagalog"),
    Language("tha", "th", "Thai"),
    Language("tib", "bo", "Tibetan"),
    Language("tir", "ti", "Tigrinya"),
    Language("ton", "to", "Tonga (Tonga Islands)"),
    Language("tsn", "tn", "Tswana"),
    Language("tso", "ts", "Tsonga"),
    Language("tuk", "tk", "Turkmen"),
    Language("tur", "tr", "Turkish"),
    Language("twi", "tw", "Twi"),
    Language("uig", "ug", "Uighur; Uyghur"),
    Language("ukr", "uk", "Ukrainian"),
    Language("urd", "ur", "Urdu"),
    Language("uzb", "uz", "Uzbek"),
    Language("ven", "ve", "Venda"),
    Language("vie", "vi", "Vietnamese"),
    Language("vol", "vo", "Volapük"),
    Language("wel", "cy", "Welsh"),
    Language("wln", "wa", "Walloon"),
    Language("wol", "wo", "Wolof"),
    Language("xho", "xh", "Xhosa"),
    Language("yid", "yi", "Yiddish"),
    Language("yor", "yo", "Yoruba"),
    Language("zha", "za", "Zhuang; Chuang"),
    Language("zul", "zu", "Zulu"),
)


COUNTRY_ALPHA2: frozenset[str] = frozenset(country.alpha2 for country in COUNTRIES)
COUNTRY_ALPHA3: frozenset[str] = frozenset(country.alpha3 for country in COUNTRIES)
LANGUAGE_ALPHA2: frozenset[str] = frozenset(language.alpha2 for language in LANGUAGES)
LANGUAGE_ALPHA3B: frozenset[str] = frozenset(language.alpha3b for language in LANGUAGES)
