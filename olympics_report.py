"""
Olympic History Report

Loads the athlete-events and 100m world-record tables, builds the four
derived tables and writes them, with their charts, to an HTML report:

1. Participation trend - Summer athletes per Games by sex
2. Medal leaderboard - most decorated athletes
3. Age distribution - age groups per sport for one Games
4. World record progression - how long each 100m record stood

Usage:
    python olympics_report.py --data-dir data --output-dir reports
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Dict, List, Optional

import pandas as pd

from config.olympics_config import LOG_LEVELS, AnalysisConfig, PARTICIPATION_NOTES
from dashboard.utils.data_loader import DataLoadError, load_all
from dashboard.utils.olympic_analysis import (
    age_distribution,
    medal_leaderboard,
    participation_trend,
    record_intervals,
)
from dashboard.utils.olympic_charts import (
    age_distribution_chart,
    medal_leaderboard_chart,
    participation_trend_chart,
    record_progression_chart,
)
from dashboard.utils.report_export import generate_html_report, write_html_report

REPORT_FILE = 'olympics_report.html'


# ============================================================================
# LOGGING SETUP
# ============================================================================

class ReportLogger:
    """Console and rotating-file logging for report runs

    Handlers are attached to the entry-point logger and to the `dashboard`
    package logger, so pipeline warnings land in the same log file.
    """

    def __init__(self, name: str, config: AnalysisConfig):
        os.makedirs(config.LOG_DIR, exist_ok=True)

        # An invalid level is reported by validate(); log it at INFO
        level = config.LOG_LEVEL if config.LOG_LEVEL in LOG_LEVELS else 'INFO'

        self.logger = logging.getLogger(name)
        self.package_logger = logging.getLogger('dashboard')
        for log in (self.logger, self.package_logger):
            log.setLevel(level)
            log.handlers.clear()

        # Console handler
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

        # File handler with rotation
        file_handler = RotatingFileHandler(
            os.path.join(config.LOG_DIR, f'olympics_report_{datetime.now().strftime("%Y%m%d")}.log'),
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))

        for log in (self.logger, self.package_logger):
            log.addHandler(console)
            log.addHandler(file_handler)

    def get_logger(self):
        return self.logger

    def close(self):
        for log in (self.logger, self.package_logger):
            for handler in list(log.handlers):
                handler.close()
                log.removeHandler(handler)


# ============================================================================
# REPORT BUILD
# ============================================================================

def build_tables(events: pd.DataFrame, records: pd.DataFrame, config: AnalysisConfig) -> Dict[str, pd.DataFrame]:
    """Run the four pipelines with the configured filters."""
    return {
        'participation': participation_trend(events, season=config.SEASON),
        'leaderboard': medal_leaderboard(
            events,
            season=config.SEASON,
            top_n=config.LEADERBOARD_SIZE,
            label_overrides=config.LABEL_OVERRIDES,
        ),
        'age_distribution': age_distribution(
            events,
            year=config.AGE_YEAR,
            season=config.SEASON,
            age_min=config.AGE_MIN,
            age_max=config.AGE_MAX,
            bucket_width=config.AGE_BUCKET_WIDTH,
        ),
        'record_intervals': record_intervals(records, date_format=config.RECORD_DATE_FORMAT),
    }


def build_report(tables: Dict[str, pd.DataFrame], config: AnalysisConfig, metadata: Optional[dict] = None) -> str:
    """Render the derived tables to charts and assemble the HTML report."""
    charts = {
        'Participation trend': participation_trend_chart(
            tables['participation'], notes=PARTICIPATION_NOTES, season=config.SEASON
        ),
        'Medal leaderboard': medal_leaderboard_chart(tables['leaderboard'], season=config.SEASON),
        'Age distribution': age_distribution_chart(
            tables['age_distribution'], year=config.AGE_YEAR, season=config.SEASON
        ),
        'World record progression': record_progression_chart(
            tables['record_intervals'], palette=config.NATIONALITY_COLORS
        ),
    }
    data_tables = {
        'Medal leaderboard': tables['leaderboard'].drop(columns='Label'),
        'World record intervals': tables['record_intervals'],
    }
    return generate_html_report(charts, data_tables, metadata)


def write_tables(tables: Dict[str, pd.DataFrame], output_dir: str) -> List[str]:
    paths = []
    for name, df in tables.items():
        path = os.path.join(output_dir, f'{name}.csv')
        df.to_csv(path, index=False)
        paths.append(path)
    return paths


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Build the Olympic history report')
    parser.add_argument('--env-file', help='Path to a .env file with OLYMPICS_* settings')
    parser.add_argument('--data-dir', help='Directory holding the two input CSV files')
    parser.add_argument('--output-dir', help='Directory for the HTML report and derived CSVs')
    parser.add_argument('--season', choices=['Summer', 'Winter'], help='Games season to analyse')
    parser.add_argument('--year', type=int, help='Games year for the age distribution')
    parser.add_argument('--top-n', type=int, help='Number of athletes on the medal leaderboard')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main report execution."""
    args = parse_args(argv)

    config = AnalysisConfig.from_env(args.env_file)
    overrides = {
        'DATA_DIR': args.data_dir,
        'OUTPUT_DIR': args.output_dir,
        'SEASON': args.season,
        'AGE_YEAR': args.year,
        'LEADERBOARD_SIZE': args.top_n,
        'LOG_LEVEL': args.log_level,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)

    config_error = None
    try:
        config.validate()
    except ValueError as e:
        config_error = str(e)

    config.ensure_directories()
    report_logger = ReportLogger('olympics_report', config)
    logger = report_logger.get_logger()

    try:
        if config_error:
            logger.error(config_error)
            return 1

        try:
            events, records = load_all(config)
        except DataLoadError as e:
            logger.error(str(e))
            return 1

        logger.info(f"Building {config.SEASON} report (age distribution: {config.AGE_YEAR})")
        tables = build_tables(events, records, config)
        for name, df in tables.items():
            logger.info(f"  {name}: {len(df)} rows")

        metadata = {
            'season': config.SEASON,
            'age_year': config.AGE_YEAR,
            'athlete_rows': len(events),
            'record_rows': len(records),
        }
        report_html = build_report(tables, config, metadata)
        write_html_report(os.path.join(config.OUTPUT_DIR, REPORT_FILE), report_html)

        for path in write_tables(tables, config.OUTPUT_DIR):
            logger.debug(f"Wrote {path}")

        logger.info(f"Report complete: {config.OUTPUT_DIR}")
        return 0
    finally:
        report_logger.close()


if __name__ == '__main__':
    sys.exit(main())
