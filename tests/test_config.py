"""
Configuration, validation and logging utility tests
"""

import json
import logging

import pytest

from orthopaths.shared.configuration import ConfigManager, ApplicationSettings
from orthopaths.shared.configuration.settings import LoggingSettings
from orthopaths.shared.exceptions import ConfigurationError, ValidationError
from orthopaths.shared.utils import (
    setup_logging, validate_grid_point, validate_path_count, parse_grid_point,
    parse_seed, timing_context
)


class TestSettings:
    """Test settings defaults and validation"""

    def test_defaults(self):
        """Defaults describe a 20x15 grid with five paths"""
        settings = ApplicationSettings()

        assert (settings.grid.width, settings.grid.height) == (20, 15)
        assert settings.grid.wall_probability == 0.25
        assert settings.routing.path_count == 5
        assert settings.display.cell_size == 40
        assert len(settings.display.path_colors) == 5
        assert not any(settings.validate().values())

    def test_invalid_values_reported_by_category(self):
        """Each category reports its own errors"""
        settings = ApplicationSettings()
        settings.grid.width = 0
        settings.routing.path_count = -1
        settings.display.start_color = (0, 300, 0)
        settings.grid.seed = -1
        settings.logging.level = "LOUD"

        errors = settings.validate()

        assert errors["grid"] and errors["routing"]
        assert "seed must be non-negative, got -1" in errors["grid"]
        assert errors["display"] and errors["logging"]


class TestConfigManager:
    """Test JSON configuration loading and saving"""

    def test_defaults_without_file(self):
        """No file in the search path leaves defaults in place"""
        manager = ConfigManager()

        assert manager.config_path is None
        assert manager.get_settings() == ApplicationSettings()

    def test_missing_explicit_file(self, tmp_path):
        """An explicit path that does not exist is an error"""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(tmp_path / "nope.json")
        assert exc_info.value.error_code == "CONFIG_NOT_FOUND"

    def test_partial_file_merges_over_defaults(self, tmp_path):
        """Only keys present in the file change"""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"grid": {"width": 8}, "routing": {"path_count": 2}}))

        settings = ConfigManager(path).get_settings()

        assert settings.grid.width == 8
        assert settings.grid.height == 15
        assert settings.routing.path_count == 2

    def test_discovers_file_in_working_directory(self, tmp_path):
        """orthopaths.json in the cwd is picked up"""
        (tmp_path / "orthopaths.json").write_text(json.dumps({"grid": {"height": 4}}))

        manager = ConfigManager()

        assert manager.get_settings().grid.height == 4

    def test_invalid_json(self, tmp_path):
        """Unparseable files raise a configuration error"""
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(path)
        assert exc_info.value.error_code == "CONFIG_PARSE"

    def test_save_and_reload(self, tmp_path):
        """Saved settings load back unchanged"""
        manager = ConfigManager()
        manager.update_grid_settings(width=9, seed=3)
        path = tmp_path / "nested" / "saved.json"

        assert manager.save(path)
        reloaded = ConfigManager(path).get_settings()

        assert reloaded.grid.width == 9
        assert reloaded.grid.seed == 3
        assert manager.config_path == path.resolve()

    def test_update_skips_none(self):
        """None values do not overwrite settings"""
        manager = ConfigManager()
        manager.update_routing_settings(path_count=None)
        assert manager.get_settings().routing.path_count == 5

    def test_require_valid(self):
        """Invalid settings raise with every error listed"""
        manager = ConfigManager()
        manager.update_grid_settings(wall_probability=2.0)

        with pytest.raises(ConfigurationError) as exc_info:
            manager.require_valid()
        assert "wall_probability" in str(exc_info.value)
        assert exc_info.value.error_code == "CONFIG_INVALID"

    @pytest.mark.parametrize("config_data,setting", [
        ({"grid": {"width": "20"}}, "grid.width"),
        ({"grid": {"wall_probability": True}}, "grid.wall_probability"),
        ({"logging": {"level": 10}}, "logging.level"),
        ({"display": {"start_color": [0, 255]}}, "display.start_color"),
        ({"routing": []}, "routing"),
    ])
    def test_wrong_types_raise(self, tmp_path, config_data, setting):
        """Values of the wrong JSON type are configuration errors"""
        path = tmp_path / "typed.json"
        path.write_text(json.dumps(config_data))

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(path)
        assert exc_info.value.error_code == "CONFIG_TYPE"
        assert exc_info.value.details["setting"] == setting

    def test_accepts_json_shapes_of_typed_fields(self, tmp_path):
        """Ints for floats, lists for colour tuples and null seeds load cleanly"""
        path = tmp_path / "shapes.json"
        path.write_text(json.dumps({
            "grid": {"wall_probability": 0, "seed": None},
            "display": {"path_colors": [[1, 2, 3]], "wall_color": [0, 0, 0]},
            "logging": {"component_levels": {"orthopaths": "DEBUG"}},
        }))

        settings = ConfigManager(path).get_settings()

        assert settings.grid.wall_probability == 0
        assert settings.display.path_colors == [[1, 2, 3]]
        assert settings.logging.component_levels == {"orthopaths": "DEBUG"}

    def test_config_info(self, tmp_path):
        """Config info reports the file in use and validation state"""
        path = tmp_path / "info.json"
        path.write_text(json.dumps({"grid": {"seed": -4}}))

        info = ConfigManager(path).get_config_info()

        assert info["config_path"] == str(path.resolve())
        assert info["config_exists"]
        assert info["validation_errors"]["grid"] == ["seed must be non-negative, got -4"]

    def test_reset_to_defaults(self):
        manager = ConfigManager()
        manager.update_grid_settings(width=3)
        manager.reset_to_defaults()
        assert manager.get_settings().grid.width == 20


class TestValidationUtils:
    """Test coordinate and count validation"""

    @pytest.mark.parametrize("text,expected", [
        ("3,4", (3, 4)),
        (" 3 , 4 ", (3, 4)),
        ("3 4", (3, 4)),
        ("-1,0", (-1, 0)),
    ])
    def test_parse_grid_point(self, text, expected):
        assert parse_grid_point(text) == expected

    @pytest.mark.parametrize("text", ["", "3", "a,b", "1,2,3"])
    def test_parse_grid_point_rejects(self, text):
        with pytest.raises(ValidationError):
            parse_grid_point(text)

    def test_validate_grid_point(self):
        """In-bounds passes; out-of-bounds names the axis"""
        validate_grid_point(2, 1, 3, 2)

        with pytest.raises(ValidationError) as exc_info:
            validate_grid_point(0, 2, 3, 2)
        assert exc_info.value.field == "y"

    def test_parse_seed(self):
        assert parse_seed("0") == 0
        assert parse_seed(" 42 ") == 42
        with pytest.raises(ValidationError):
            parse_seed("-1")
        with pytest.raises(ValidationError):
            parse_seed("abc")

    def test_validate_path_count(self):
        validate_path_count(0)
        with pytest.raises(ValidationError):
            validate_path_count(-1)
        with pytest.raises(ValidationError):
            validate_path_count(True)


class TestLoggingUtils:
    """Test logging setup from settings"""

    def test_setup_logging_levels(self):
        """Root and component levels follow settings"""
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            setup_logging(LoggingSettings(level="WARNING",
                                          component_levels={"orthopaths.algorithms": "DEBUG"}))

            assert root.level == logging.WARNING
            assert logging.getLogger("orthopaths.algorithms").level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            logging.getLogger("orthopaths.algorithms").setLevel(logging.NOTSET)

    def test_file_output(self, tmp_path):
        """File output writes to the configured log file"""
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        log_file = tmp_path / "logs" / "run.log"
        try:
            setup_logging(LoggingSettings(console_output=False, file_output=True,
                                          log_file=str(log_file)))
            logging.getLogger("orthopaths.test").info("hello from test")
            for handler in root.handlers:
                handler.flush()

            assert "hello from test" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_timing_context(self):
        """The timing result is filled in on exit"""
        with timing_context("block") as timing:
            sum(range(1000))

        assert timing.label == "block"
        assert timing.elapsed_seconds >= 0.0


class TestGlobalConfig:
    """Test the module-level configuration accessors"""

    def test_initialize_then_get(self, tmp_path):
        """get_config returns the manager installed by initialize_config"""
        from orthopaths.shared.configuration import get_config, initialize_config
        from orthopaths.shared.utils import get_logger

        path = tmp_path / "global.json"
        path.write_text(json.dumps({"routing": {"path_count": 7}}))

        manager = initialize_config(path)

        assert get_config() is manager
        assert get_config().get_settings().routing.path_count == 7
        assert get_logger("orthopaths.x") is logging.getLogger("orthopaths.x")
