import pytest
import kopf

from certrotation.operator.handler import resolve_self_sign_configuration, validate_nmstate


def test_validate_nmstate_accepts_valid_configuration(valid_configuration, logger):
    validate_nmstate(spec={"selfSignConfiguration": valid_configuration}, name="nmstate", logger=logger)
    logger.warning.assert_not_called()


def test_validate_nmstate_accepts_missing_configuration(logger):
    validate_nmstate(spec={}, name="nmstate", logger=logger)
    logger.warning.assert_not_called()


def test_validate_nmstate_rejects_invalid_configuration(logger):
    spec = {
        "selfSignConfiguration": {
            "caRotateInterval": "1h",
            "caOverlapInterval": "2h",
            "certRotateInterval": "1h",
            "certOverlapInterval": "2h",
        }
    }

    with pytest.raises(kopf.AdmissionError) as exc_info:
        validate_nmstate(spec=spec, name="nmstate", logger=logger)

    lines = str(exc_info.value).split("\n")
    assert len(lines) == 2
    assert "caOverlapInterval(2h0m0s) has to be <= caRotateInterval(1h0m0s)" in lines[0]
    assert "certOverlapInterval(2h0m0s) has to be <= certRotateInterval(1h0m0s)" in lines[1]
    logger.warning.assert_called_once()


def test_resolve_uses_defaults_when_unset(logger):
    result = resolve_self_sign_configuration(spec={}, name="nmstate", logger=logger)

    assert result == {
        "caRotateInterval": "168h0m0s",
        "caOverlapInterval": "24h0m0s",
        "certRotateInterval": "24h0m0s",
        "certOverlapInterval": "8h0m0s",
    }


def test_resolve_keeps_valid_configuration(valid_configuration, logger):
    result = resolve_self_sign_configuration(
        spec={"selfSignConfiguration": valid_configuration}, name="nmstate", logger=logger
    )
    assert result == valid_configuration


def test_resolve_rejects_invalid_configuration(logger):
    spec = {"selfSignConfiguration": {"caRotateInterval": "1h"}}

    with pytest.raises(kopf.PermanentError) as exc_info:
        resolve_self_sign_configuration(spec=spec, name="nmstate", logger=logger)

    assert "caOverlapInterval is missing" in str(exc_info.value)
    assert str(exc_info.value).count("\n") == 2


def test_validate_nmstate_rejects_non_mapping_configuration(logger):
    with pytest.raises(kopf.AdmissionError) as exc_info:
        validate_nmstate(spec={"selfSignConfiguration": "24h"}, name="nmstate", logger=logger)

    assert "must be a mapping" in str(exc_info.value)
    logger.warning.assert_called_once()


def test_resolve_rejects_non_mapping_configuration(logger):
    with pytest.raises(kopf.PermanentError):
        resolve_self_sign_configuration(spec={"selfSignConfiguration": ["24h"]}, name="nmstate", logger=logger)
