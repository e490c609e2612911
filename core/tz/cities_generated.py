"""Curated subset of the GeoNames cities15000 city to IANA timezone table.

Run scripts/gen_cities.py to replace it with the full generated table.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

_CITIES: Dict[str, str] = {
    'aarhus': 'Europe/Copenhagen',
    'abidjan': 'Africa/Abidjan',
    'abu dhabi': 'Asia/Dubai',
    'abuja': 'Africa/Lagos',
    'accra': 'Africa/Accra',
    'addis ababa': 'Africa/Addis_Ababa',
    'adelaide': 'Australia/Adelaide',
    'ahmedabad': 'Asia/Kolkata',
    'albuquerque': 'America/Denver',
    'alexandria': 'Africa/Cairo',
    'algiers': 'Africa/Algiers',
    'almaty': 'Asia/Almaty',
    'amman': 'Asia/Amman',
    'amsterdam': 'Europe/Amsterdam',
    'anchorage': 'America/Anchorage',
    'ankara': 'Europe/Istanbul',
    'antananarivo': 'Indian/Antananarivo',
    'antwerp': 'Europe/Brussels',
    'antwerpen': 'Europe/Brussels',
    'apia': 'Pacific/Apia',
    'ashgabat': 'Asia/Ashgabat',
    'astana': 'Asia/Almaty',
    'asuncion': 'America/Asuncion',
    'asunción': 'America/Asuncion',
    'athens': 'Europe/Athens',
    'atlanta': 'America/New_York',
    'auckland': 'Pacific/Auckland',
    'austin': 'America/Chicago',
    'baghdad': 'Asia/Baghdad',
    'baku': 'Asia/Baku',
    'baltimore': 'America/New_York',
    'bandung': 'Asia/Jakarta',
    'bangalore': 'Asia/Kolkata',
    'bangkok': 'Asia/Bangkok',
    'barcelona': 'Europe/Madrid',
    'basel': 'Europe/Zurich',
    'beijing': 'Asia/Shanghai',
    'beirut': 'Asia/Beirut',
    'belfast': 'Europe/London',
    'belgrade': 'Europe/Belgrade',
    'belo horizonte': 'America/Sao_Paulo',
    'bengaluru': 'Asia/Kolkata',
    'bergen': 'Europe/Oslo',
    'berlin': 'Europe/Berlin',
    'bern': 'Europe/Zurich',
    'bilbao': 'Europe/Madrid',
    'birmingham': 'Europe/London',
    'bishkek': 'Asia/Bishkek',
    'bogota': 'America/Bogota',
    'bogotá': 'America/Bogota',
    'boise': 'America/Boise',
    'bologna': 'Europe/Rome',
    'bordeaux': 'Europe/Paris',
    'boston': 'America/New_York',
    'brasilia': 'America/Sao_Paulo',
    'brasília': 'America/Sao_Paulo',
    'bratislava': 'Europe/Bratislava',
    'brisbane': 'Australia/Brisbane',
    'bristol': 'Europe/London',
    'brno': 'Europe/Prague',
    'brussels': 'Europe/Brussels',
    'bucharest': 'Europe/Bucharest',
    'budapest': 'Europe/Budapest',
    'buenos aires': 'America/Argentina/Buenos_Aires',
    'busan': 'Asia/Seoul',
    'cairo': 'Africa/Cairo',
    'calgary': 'America/Edmonton',
    'canberra': 'Australia/Sydney',
    'cancun': 'America/Cancun',
    'cancún': 'America/Cancun',
    'cape town': 'Africa/Johannesburg',
    'caracas': 'America/Caracas',
    'cardiff': 'Europe/London',
    'casablanca': 'Africa/Casablanca',
    'cebu city': 'Asia/Manila',
    'charlotte': 'America/New_York',
    'chengdu': 'Asia/Shanghai',
    'chennai': 'Asia/Kolkata',
    'chiang mai': 'Asia/Bangkok',
    'chicago': 'America/Chicago',
    'chisinau': 'Europe/Chisinau',
    'chittagong': 'Asia/Dhaka',
    'chişinău': 'Europe/Chisinau',
    'chongqing': 'Asia/Shanghai',
    'christchurch': 'Pacific/Auckland',
    'cincinnati': 'America/New_York',
    'ciudad de mexico': 'America/Mexico_City',
    'ciudad de méxico': 'America/Mexico_City',
    'cleveland': 'America/New_York',
    'cluj-napoca': 'Europe/Bucharest',
    'cologne': 'Europe/Berlin',
    'colombo': 'Asia/Colombo',
    'columbus': 'America/New_York',
    'copenhagen': 'Europe/Copenhagen',
    'cordoba': 'America/Argentina/Cordoba',
    'cork': 'Europe/Dublin',
    'curitiba': 'America/Sao_Paulo',
    'córdoba': 'America/Argentina/Cordoba',
    'dakar': 'Africa/Dakar',
    'dallas': 'America/Chicago',
    'damascus': 'Asia/Damascus',
    'dar es salaam': 'Africa/Dar_es_Salaam',
    'darwin': 'Australia/Darwin',
    'delhi': 'Asia/Kolkata',
    'denpasar': 'Asia/Makassar',
    'denver': 'America/Denver',
    'detroit': 'America/Detroit',
    'dhaka': 'Asia/Dhaka',
    'doha': 'Asia/Qatar',
    'dresden': 'Europe/Berlin',
    'dubai': 'Asia/Dubai',
    'dublin': 'Europe/Dublin',
    'durban': 'Africa/Johannesburg',
    'dushanbe': 'Asia/Dushanbe',
    'dusseldorf': 'Europe/Berlin',
    'düsseldorf': 'Europe/Berlin',
    'edinburgh': 'Europe/London',
    'edmonton': 'America/Edmonton',
    'eindhoven': 'Europe/Amsterdam',
    'florence': 'Europe/Rome',
    'fort worth': 'America/Chicago',
    'fortaleza': 'America/Fortaleza',
    'frankfurt': 'Europe/Berlin',
    'frankfurt am main': 'Europe/Berlin',
    'fukuoka': 'Asia/Tokyo',
    'gdansk': 'Europe/Warsaw',
    'gdańsk': 'Europe/Warsaw',
    'geneva': 'Europe/Zurich',
    'geneve': 'Europe/Zurich',
    'genève': 'Europe/Zurich',
    'glasgow': 'Europe/London',
    'gold coast': 'Australia/Brisbane',
    'goteborg': 'Europe/Stockholm',
    'gothenburg': 'Europe/Stockholm',
    'graz': 'Europe/Vienna',
    'guadalajara': 'America/Mexico_City',
    'guangzhou': 'Asia/Shanghai',
    'guatemala city': 'America/Guatemala',
    'guayaquil': 'America/Guayaquil',
    'göteborg': 'Europe/Stockholm',
    'hagatna': 'Pacific/Guam',
    'hagåtña': 'Pacific/Guam',
    'halifax': 'America/Halifax',
    'hamburg': 'Europe/Berlin',
    'hangzhou': 'Asia/Shanghai',
    'hanoi': 'Asia/Bangkok',
    'harare': 'Africa/Harare',
    'havana': 'America/Havana',
    'helsinki': 'Europe/Helsinki',
    'ho chi minh city': 'Asia/Ho_Chi_Minh',
    'hobart': 'Australia/Hobart',
    'hong kong': 'Asia/Hong_Kong',
    'honolulu': 'Pacific/Honolulu',
    'houston': 'America/Chicago',
    'hyderabad': 'Asia/Kolkata',
    'incheon': 'Asia/Seoul',
    'indianapolis': 'America/Indiana/Indianapolis',
    'irkutsk': 'Asia/Irkutsk',
    'islamabad': 'Asia/Karachi',
    'istanbul': 'Europe/Istanbul',
    'izmir': 'Europe/Istanbul',
    'jacksonville': 'America/New_York',
    'jaipur': 'Asia/Kolkata',
    'jakarta': 'Asia/Jakarta',
    'jeddah': 'Asia/Riyadh',
    'jerusalem': 'Asia/Jerusalem',
    'johannesburg': 'Africa/Johannesburg',
    'kabul': 'Asia/Kabul',
    'kampala': 'Africa/Kampala',
    'kansas city': 'America/Chicago',
    'kaohsiung': 'Asia/Taipei',
    'karachi': 'Asia/Karachi',
    'kathmandu': 'Asia/Kathmandu',
    'kazan': 'Europe/Moscow',
    'kharkiv': 'Europe/Kyiv',
    'khartoum': 'Africa/Khartoum',
    'kiev': 'Europe/Kyiv',
    'kigali': 'Africa/Kigali',
    'kingston': 'America/Jamaica',
    'kinshasa': 'Africa/Kinshasa',
    'kolkata': 'Asia/Kolkata',
    'koln': 'Europe/Berlin',
    'krakow': 'Europe/Warsaw',
    'kraków': 'Europe/Warsaw',
    'krasnoyarsk': 'Asia/Krasnoyarsk',
    'kuala lumpur': 'Asia/Kuala_Lumpur',
    'kuwait city': 'Asia/Kuwait',
    'kyiv': 'Europe/Kyiv',
    'kyoto': 'Asia/Tokyo',
    'köln': 'Europe/Berlin',
    'la paz': 'America/La_Paz',
    'lagos': 'Africa/Lagos',
    'lahore': 'Asia/Karachi',
    'las palmas de gran canaria': 'Atlantic/Canary',
    'las vegas': 'America/Los_Angeles',
    'leeds': 'Europe/London',
    'leipzig': 'Europe/Berlin',
    'lima': 'America/Lima',
    'lisbon': 'Europe/Lisbon',
    'liverpool': 'Europe/London',
    'ljubljana': 'Europe/Ljubljana',
    'london': 'Europe/London',
    'los angeles': 'America/Los_Angeles',
    'louisville': 'America/Kentucky/Louisville',
    'luanda': 'Africa/Luanda',
    'lusaka': 'Africa/Lusaka',
    'luxembourg': 'Europe/Luxembourg',
    'lviv': 'Europe/Kyiv',
    'lyon': 'Europe/Paris',
    'macau': 'Asia/Macau',
    'madrid': 'Europe/Madrid',
    'makassar': 'Asia/Makassar',
    'malaga': 'Europe/Madrid',
    'malmo': 'Europe/Stockholm',
    'malmö': 'Europe/Stockholm',
    'managua': 'America/Managua',
    'manama': 'Asia/Bahrain',
    'manaus': 'America/Manaus',
    'manchester': 'Europe/London',
    'manila': 'Asia/Manila',
    'maputo': 'Africa/Maputo',
    'marrakesh': 'Africa/Casablanca',
    'marseille': 'Europe/Paris',
    'mecca': 'Asia/Riyadh',
    'medellin': 'America/Bogota',
    'medellín': 'America/Bogota',
    'melbourne': 'Australia/Melbourne',
    'memphis': 'America/Chicago',
    'mexico city': 'America/Mexico_City',
    'miami': 'America/New_York',
    'milan': 'Europe/Rome',
    'milwaukee': 'America/Chicago',
    'minneapolis': 'America/Chicago',
    'minsk': 'Europe/Minsk',
    'mombasa': 'Africa/Nairobi',
    'monterrey': 'America/Monterrey',
    'montevideo': 'America/Montevideo',
    'montreal': 'America/Toronto',
    'montréal': 'America/Toronto',
    'moscow': 'Europe/Moscow',
    'muenchen': 'Europe/Berlin',
    'mumbai': 'Asia/Kolkata',
    'munich': 'Europe/Berlin',
    'muscat': 'Asia/Muscat',
    'málaga': 'Europe/Madrid',
    'münchen': 'Europe/Berlin',
    'nagoya': 'Asia/Tokyo',
    'nairobi': 'Africa/Nairobi',
    'nanjing': 'Asia/Shanghai',
    'naples': 'Europe/Rome',
    'nashville': 'America/Chicago',
    'new delhi': 'Asia/Kolkata',
    'new orleans': 'America/Chicago',
    'new york': 'America/New_York',
    'new york city': 'America/New_York',
    'nice': 'Europe/Paris',
    'nicosia': 'Asia/Nicosia',
    'noumea': 'Pacific/Noumea',
    'nouméa': 'Pacific/Noumea',
    'novosibirsk': 'Asia/Novosibirsk',
    'odesa': 'Europe/Kyiv',
    'orlando': 'America/New_York',
    'osaka': 'Asia/Tokyo',
    'oslo': 'Europe/Oslo',
    'ottawa': 'America/Toronto',
    'palermo': 'Europe/Rome',
    'panama city': 'America/Panama',
    'papeete': 'Pacific/Tahiti',
    'paris': 'Europe/Paris',
    'perth': 'Australia/Perth',
    'philadelphia': 'America/New_York',
    'phnom penh': 'Asia/Phnom_Penh',
    'phoenix': 'America/Phoenix',
    'pittsburgh': 'America/New_York',
    'podgorica': 'Europe/Podgorica',
    'port louis': 'Indian/Mauritius',
    'port moresby': 'Pacific/Port_Moresby',
    'portland': 'America/Los_Angeles',
    'porto': 'Europe/Lisbon',
    'porto alegre': 'America/Sao_Paulo',
    'prague': 'Europe/Prague',
    'pretoria': 'Africa/Johannesburg',
    'pune': 'Asia/Kolkata',
    'pyongyang': 'Asia/Pyongyang',
    'quebec': 'America/Toronto',
    'quezon city': 'Asia/Manila',
    'quito': 'America/Guayaquil',
    'québec': 'America/Toronto',
    'rabat': 'Africa/Casablanca',
    'raleigh': 'America/New_York',
    'recife': 'America/Recife',
    'regina': 'America/Regina',
    'reykjavik': 'Atlantic/Reykjavik',
    'reykjavík': 'Atlantic/Reykjavik',
    'riga': 'Europe/Riga',
    'rio de janeiro': 'America/Sao_Paulo',
    'riyadh': 'Asia/Riyadh',
    'rome': 'Europe/Rome',
    'rotterdam': 'Europe/Amsterdam',
    'sacramento': 'America/Los_Angeles',
    'saint louis': 'America/Chicago',
    'saint petersburg': 'Europe/Moscow',
    'salt lake city': 'America/Denver',
    'salvador': 'America/Bahia',
    'salzburg': 'Europe/Vienna',
    'samara': 'Europe/Samara',
    'san antonio': 'America/Chicago',
    'san diego': 'America/Los_Angeles',
    'san francisco': 'America/Los_Angeles',
    'san jose': 'America/Los_Angeles',
    'san josé': 'America/Costa_Rica',
    'san juan': 'America/Puerto_Rico',
    'san salvador': 'America/El_Salvador',
    'sanaa': 'Asia/Aden',
    'santiago': 'America/Santiago',
    'santo domingo': 'America/Santo_Domingo',
    'sao paulo': 'America/Sao_Paulo',
    'sapporo': 'Asia/Tokyo',
    'sarajevo': 'Europe/Sarajevo',
    'seattle': 'America/Los_Angeles',
    'seoul': 'Asia/Seoul',
    'sevilla': 'Europe/Madrid',
    'seville': 'Europe/Madrid',
    'shanghai': 'Asia/Shanghai',
    'shenzhen': 'Asia/Shanghai',
    'singapore': 'Asia/Singapore',
    'skopje': 'Europe/Skopje',
    'sofia': 'Europe/Sofia',
    "st. john's": 'America/St_Johns',
    'st. louis': 'America/Chicago',
    'stockholm': 'Europe/Stockholm',
    'stuttgart': 'Europe/Berlin',
    'surabaya': 'Asia/Jakarta',
    'suva': 'Pacific/Fiji',
    'sydney': 'Australia/Sydney',
    'são paulo': 'America/Sao_Paulo',
    'taipei': 'Asia/Taipei',
    'tallinn': 'Europe/Tallinn',
    'tampa': 'America/New_York',
    'tampere': 'Europe/Helsinki',
    'tashkent': 'Asia/Tashkent',
    'tbilisi': 'Asia/Tbilisi',
    'tegucigalpa': 'America/Tegucigalpa',
    'tehran': 'Asia/Tehran',
    'tel aviv': 'Asia/Jerusalem',
    'the hague': 'Europe/Amsterdam',
    'thessaloniki': 'Europe/Athens',
    'thimphu': 'Asia/Thimphu',
    'tianjin': 'Asia/Shanghai',
    'tijuana': 'America/Tijuana',
    'tirana': 'Europe/Tirane',
    'tokyo': 'Asia/Tokyo',
    'toronto': 'America/Toronto',
    'toulouse': 'Europe/Paris',
    'tripoli': 'Africa/Tripoli',
    'tucson': 'America/Phoenix',
    'tunis': 'Africa/Tunis',
    'turin': 'Europe/Rome',
    'ulaanbaatar': 'Asia/Ulaanbaatar',
    'utrecht': 'Europe/Amsterdam',
    'valencia': 'Europe/Madrid',
    'valletta': 'Europe/Malta',
    'vancouver': 'America/Vancouver',
    'venice': 'Europe/Rome',
    'vienna': 'Europe/Vienna',
    'vientiane': 'Asia/Vientiane',
    'vilnius': 'Europe/Vilnius',
    'vladivostok': 'Asia/Vladivostok',
    'warsaw': 'Europe/Warsaw',
    'washington': 'America/New_York',
    'wellington': 'Pacific/Auckland',
    'windhoek': 'Africa/Windhoek',
    'winnipeg': 'America/Winnipeg',
    'wroclaw': 'Europe/Warsaw',
    'wrocław': 'Europe/Warsaw',
    'wuhan': 'Asia/Shanghai',
    "xi'an": 'Asia/Shanghai',
    'yangon': 'Asia/Yangon',
    'yekaterinburg': 'Asia/Yekaterinburg',
    'yerevan': 'Asia/Yerevan',
    'yokohama': 'Asia/Tokyo',
    'zagreb': 'Europe/Zagreb',
    'zurich': 'Europe/Zurich',
    'zürich': 'Europe/Zurich',
}

CITIES: Mapping[str, str] = MappingProxyType(_CITIES)
