from enum import Enum


class EventCategory(str, Enum):
    PARTY = 'Party'
    GAMES = 'Games'
    TRAVELING = 'Traveling'
    HIKING = 'Hiking'
    CONFERENCE = 'Conference'
    FESTIVAL = 'Festival'
