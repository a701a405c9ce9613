"""Tests for configuration, JSON helpers and logging setup."""

import json
import logging
from enum import Enum

import pytest

from golfscore import config
from golfscore.logging_config import get_logger, setup_logging
from golfscore.models import TeamStatus
from golfscore.schemas import ScoringConfig
from golfscore.utils import load_json, save_json, to_jsonable


@pytest.fixture
def custom_config(tmp_path, monkeypatch):
    """Point the config loader at a temporary scoring_config.json."""
    path = tmp_path / 'scoring_config.json'
    monkeypatch.setattr(config, 'CONFIG_PATH', path)
    config.clear_config_cache()
    yield path
    config.clear_config_cache()


class TestConfig:
    """Tests for the cached engine configuration."""

    def test_shipped_config(self):
        config.clear_config_cache()
        assert config.get_default_format() == 'stroke_play'
        assert config.get_default_scoring_mode() == 'gross'
        assert config.get_standard_ratings() == (72.0, 113)
        assert config.get_points_multiplier() == 1.0

    def test_custom_config(self, custom_config):
        custom_config.write_text(json.dumps({
            'default_format': 'stableford',
            'default_scoring_mode': 'net',
            'points_multiplier': 2.0,
        }))
        assert config.get_default_format() == 'stableford'
        assert config.get_default_scoring_mode() == 'net'
        assert config.get_points_multiplier() == 2.0
        assert config.get_standard_ratings() == (72.0, 113)

    def test_config_is_cached(self, custom_config):
        custom_config.write_text(json.dumps({'default_format': 'stroke_play'}))
        assert config.get_default_format() == 'stroke_play'

        custom_config.write_text(json.dumps({'default_format': 'stableford'}))
        assert config.get_default_format() == 'stroke_play'

        config.clear_config_cache()
        assert config.get_default_format() == 'stableford'

    def test_invalid_config(self, custom_config):
        custom_config.write_text(json.dumps({'default_format': 'stroke_play', 'default_scoring_mode': 'match'}))
        with pytest.raises(ValueError, match='Schema validation failed'):
            config.get_config()

    def test_missing_config(self, custom_config):
        with pytest.raises(FileNotFoundError):
            config.get_config()


class TestJsonHelpers:
    """Tests for load_json, save_json and to_jsonable."""

    def test_round_trip_dataclasses(self, tmp_path):
        path = save_json(tmp_path / 'out' / 'status.json', {'status': TeamStatus.FINISHED, 'scores': (4, 5)})
        assert path.exists()
        assert load_json(path) == {'status': 'FINISHED', 'scores': [4, 5]}

    def test_load_with_schema(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'default_format': 'stableford'}))
        loaded = load_json(path, schema=ScoringConfig)
        assert isinstance(loaded, ScoringConfig)
        assert loaded.default_format == 'stableford'

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / 'missing.json')

    def test_load_malformed(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('{not json')
        with pytest.raises(json.JSONDecodeError):
            load_json(path)

    def test_to_jsonable_model(self):
        model = ScoringConfig(default_format='stroke_play')
        assert to_jsonable(model)['default_format'] == 'stroke_play'

    def test_to_jsonable_enum(self):
        class Colour(Enum):
            RED = 'red'

        assert to_jsonable([Colour.RED]) == ['red']

    def test_save_unserializable(self, tmp_path):
        with pytest.raises(TypeError):
            save_json(tmp_path / 'bad.json', {'value': object()})


class TestLogging:
    """Tests for logging setup."""

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        yield
        logger = logging.getLogger('golfscore')
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        logger.setLevel(logging.NOTSET)

    def test_file_logging(self, tmp_path):
        logger = setup_logging(log_dir=tmp_path / 'logs', log_to_console=False)
        get_logger('scoring').info('scored round')
        for handler in logger.handlers:
            handler.flush()

        log_files = list((tmp_path / 'logs').glob('golfscore_*.log'))
        assert len(log_files) == 1
        assert 'scored round' in log_files[0].read_text()

    def test_console_only(self):
        logger = setup_logging(log_to_file=False, level=logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_get_logger_names(self):
        assert get_logger('teams').name == 'golfscore.teams'
        assert get_logger('golfscore.teams').name == 'golfscore.teams'
        assert get_logger().name == 'golfscore'
