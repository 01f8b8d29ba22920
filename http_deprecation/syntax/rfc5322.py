"""
Regex for the date-time production of RFC5322 (which obsoletes RFC2822).

  <https://tools.ietf.org/html/rfc5322#section-3.3>

Comments and folding whitespace (CFWS) are not allowed in header values
here, so FWS is reduced to runs of WSP. They should be processed with
re.VERBOSE | re.IGNORECASE.
"""

# pylint: disable=invalid-name

from .rfc5234 import DIGIT, WSP

SPEC_URL = "https://tools.ietf.org/html/rfc5322"

FWS = rf"(?: {WSP}+ )"

# day-name        =   "Mon" / "Tue" / "Wed" / "Thu" /
#                     "Fri" / "Sat" / "Sun"

day_name = r"(?: Mon | Tue | Wed | Thu | Fri | Sat | Sun )"

# day-of-week     =   ([FWS] day-name) / obs-day-of-week

day_of_week = rf"(?: {FWS}? {day_name} )"

# day             =   ([FWS] 1*2DIGIT FWS) / obs-day

day = rf"(?: {FWS}? {DIGIT}{{1,2}} {FWS} )"

# month           =   "Jan" / "Feb" / "Mar" / "Apr" /
#                     "May" / "Jun" / "Jul" / "Aug" /
#                     "Sep" / "Oct" / "Nov" / "Dec"

month = r"(?: Jan | Feb | Mar | Apr | May | Jun | Jul | Aug | Sep | Oct | Nov | Dec )"

# year            =   (FWS 4*DIGIT FWS) / obs-year

year = rf"(?: {FWS} {DIGIT}{{4}} {FWS} )"

# obs-year        =   [CFWS] 2*DIGIT [CFWS]

obs_year = rf"(?: {FWS} {DIGIT}{{2}} {FWS} )"

# date            =   day month year

date = rf"(?: {day} {month} (?: {year} | {obs_year} ) )"

# hour            =   2DIGIT / obs-hour
# minute          =   2DIGIT / obs-minute
# second          =   2DIGIT / obs-second

hour = rf"(?: {DIGIT}{{2}} )"
minute = rf"(?: {DIGIT}{{2}} )"
second = rf"(?: {DIGIT}{{2}} )"

# time-of-day     =   hour ":" minute [ ":" second ]

time_of_day = rf"(?: {hour} : {minute} (?: : {second} )? )"

# zone            =   (FWS ( "+" / "-" ) 4DIGIT) / obs-zone

zone = rf"(?: [+-] {DIGIT}{{4}} )"

# obs-zone        =   "UT" / "GMT" /     ; Universal Time
#                     "EST" / "EDT" /    ; Eastern:  - 5/ - 4
#                     "CST" / "CDT" /    ; Central:  - 6/ - 5
#                     "MST" / "MDT" /    ; Mountain: - 7/ - 6
#                     "PST" / "PDT" /    ; Pacific:  - 8/ - 7
#                     %d65-73 /          ; Military zones - "A"
#                     %d75-90 /          ; through "I" and "K"
#                     %d97-105 /         ; through "Z", both
#                     %d107-122          ; upper and lower case

obs_zone = r"(?: UT | GMT | EST | EDT | CST | CDT | MST | MDT | PST | PDT | [A-IK-Z] )"

# time            =   time-of-day zone

time = rf"(?: {time_of_day} {FWS} (?: {zone} | {obs_zone} ) )"

# date-time       =   [ day-of-week "," ] date time [CFWS]

date_time = rf"(?: (?: {day_of_week} , )? {date} {time} {FWS}? )"

# date-time without any of the obsolete forms

current_date_time = rf"(?: (?: {day_of_week} , )? {day} {month} {year} {time_of_day} {FWS} {zone} {FWS}? )"
