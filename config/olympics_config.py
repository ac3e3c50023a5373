"""
Centralized Analysis Configuration
Olympic History Report - athlete participation, medals, ages and 100m records
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv


SEASONS = ('Summer', 'Winter')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Labels built as "Name (NOC)" that collide with a parenthetical maiden name
# in the source data.
LABEL_OVERRIDES = {
    'Larysa Semenivna Latynina (Diriy-) (URS)': 'Larysa Latynina (URS)',
    'Jennifer Elisabeth "Jenny" Thompson (-Cumpelik) (USA)': 'Jenny Thompson (USA)',
}

# Record-holder nationality -> segment colour. Nationalities not listed are
# drawn in the neutral fallback colour.
NATIONALITY_COLORS = {
    'United States': '#0085C7',
    'Canada': '#DF0024',
    'Jamaica': '#009F3D',
}


@dataclass
class AnalysisConfig:
    """Centralized configuration for the Olympic history report"""

    # Directories
    DATA_DIR: str = 'data'
    OUTPUT_DIR: str = 'reports'
    LOG_DIR: str = 'logs'

    # Input files (relative to DATA_DIR)
    ATHLETE_EVENTS_FILE: str = 'athlete_events.csv'
    WORLD_RECORDS_FILE: str = 'mens_100m_world_records.csv'
    RECORD_DATE_FORMAT: str = '%m/%d/%Y'

    # Filters
    SEASON: str = 'Summer'
    AGE_YEAR: int = 2016

    # Age buckets: [AGE_MIN, AGE_MAX) in steps of AGE_BUCKET_WIDTH
    AGE_MIN: int = 10
    AGE_MAX: int = 64
    AGE_BUCKET_WIDTH: int = 4

    # Medal leaderboard
    LEADERBOARD_SIZE: int = 10
    LABEL_OVERRIDES: Dict[str, str] = field(default_factory=lambda: dict(LABEL_OVERRIDES))

    # Record progression
    NATIONALITY_COLORS: Dict[str, str] = field(default_factory=lambda: dict(NATIONALITY_COLORS))

    # Logging
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_MAX_BYTES: int = 10485760  # 10MB
    LOG_BACKUP_COUNT: int = 5

    @classmethod
    def from_env(cls, env_path: Optional[str] = None):
        """Load configuration from a .env file and the process environment"""
        env_locations = [
            env_path,
            '.env',
            'config/.env',
        ]

        for loc in env_locations:
            if loc and os.path.exists(loc):
                load_dotenv(loc)
                break

        defaults = cls()
        return cls(
            DATA_DIR=os.getenv('OLYMPICS_DATA_DIR', defaults.DATA_DIR),
            OUTPUT_DIR=os.getenv('OLYMPICS_OUTPUT_DIR', defaults.OUTPUT_DIR),
            LOG_DIR=os.getenv('OLYMPICS_LOG_DIR', defaults.LOG_DIR),
            ATHLETE_EVENTS_FILE=os.getenv('ATHLETE_EVENTS_FILE', defaults.ATHLETE_EVENTS_FILE),
            WORLD_RECORDS_FILE=os.getenv('WORLD_RECORDS_FILE', defaults.WORLD_RECORDS_FILE),
            RECORD_DATE_FORMAT=os.getenv('RECORD_DATE_FORMAT', defaults.RECORD_DATE_FORMAT),
            SEASON=os.getenv('OLYMPICS_SEASON', defaults.SEASON),
            AGE_YEAR=int(os.getenv('OLYMPICS_AGE_YEAR', defaults.AGE_YEAR)),
            AGE_MIN=int(os.getenv('OLYMPICS_AGE_MIN', defaults.AGE_MIN)),
            AGE_MAX=int(os.getenv('OLYMPICS_AGE_MAX', defaults.AGE_MAX)),
            AGE_BUCKET_WIDTH=int(os.getenv('OLYMPICS_AGE_BUCKET_WIDTH', defaults.AGE_BUCKET_WIDTH)),
            LEADERBOARD_SIZE=int(os.getenv('OLYMPICS_LEADERBOARD_SIZE', defaults.LEADERBOARD_SIZE)),
            LOG_LEVEL=os.getenv('OLYMPICS_LOG_LEVEL', defaults.LOG_LEVEL).upper(),
        )

    def validate(self) -> bool:
        """Validate filter and bucket settings"""
        problems: List[str] = []

        if self.SEASON not in SEASONS:
            problems.append(f"SEASON must be one of {', '.join(SEASONS)} (got {self.SEASON!r})")
        if self.AGE_BUCKET_WIDTH <= 0:
            problems.append('AGE_BUCKET_WIDTH must be positive')
        if self.AGE_MIN >= self.AGE_MAX:
            problems.append('AGE_MIN must be lower than AGE_MAX')
        if self.LEADERBOARD_SIZE <= 0:
            problems.append('LEADERBOARD_SIZE must be positive')
        if self.LOG_LEVEL not in LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got {self.LOG_LEVEL!r})")

        if problems:
            raise ValueError(f"Invalid config: {'; '.join(problems)}")

        return True

    @property
    def athlete_events_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.ATHLETE_EVENTS_FILE)

    @property
    def world_records_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.WORLD_RECORDS_FILE)

    def ensure_directories(self):
        """Create output directories if they don't exist"""
        for d in [self.OUTPUT_DIR, self.LOG_DIR]:
            os.makedirs(d, exist_ok=True)


# Column presence checked on load
REQUIRED_COLUMNS = {
    'athlete_events': [
        'ID',
        'Name',
        'Sex',
        'Age',
        'Team',
        'NOC',
        'Year',
        'Season',
        'Sport',
        'Event',
        'Medal',
    ],
    'world_records': [
        'Time',
        'Wind',
        'Athlete',
        'Nationality',
        'Date',
    ],
}

NUMERIC_COLUMNS = {
    'athlete_events': ['Age', 'Height', 'Weight', 'Year'],
    'world_records': ['Time', 'Wind'],
}


@dataclass(frozen=True)
class HistoricalNote:
    """Text overlay for a notable year on the participation chart"""
    year: int
    text: str


PARTICIPATION_NOTES = [
    HistoricalNote(1900, 'Women compete for the first time'),
    HistoricalNote(1916, 'Cancelled (World War I)'),
    HistoricalNote(1940, 'Cancelled (World War II)'),
    HistoricalNote(1944, 'Cancelled (World War II)'),
    HistoricalNote(1976, 'African boycott'),
    HistoricalNote(1980, 'US-led boycott'),
    HistoricalNote(1984, 'Soviet-led boycott'),
]


if __name__ == "__main__":
    config = AnalysisConfig.from_env()
    config.validate()

    print("Configuration loaded successfully!")
    print(f"Athlete events: {config.athlete_events_path}")
    print(f"World records: {config.world_records_path}")
    print(f"Season: {config.SEASON} | Age year: {config.AGE_YEAR}")
    print(f"Age buckets: [{config.AGE_MIN}, {config.AGE_MAX}) step {config.AGE_BUCKET_WIDTH}")
