"""Tests for the in-memory configuration store."""

import pytest


class TestConfigurationRead:
    """Typed reads with fallbacks and defaults."""

    def test_unset_returns_declared_default(self) -> None:
        from savepoint_restore.contracts import RecoveryClaimMode, StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration()
        assert config.get(StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE) is False
        assert config.get(StateRecoveryOptions.RESTORE_MODE) is RecoveryClaimMode.NO_CLAIM
        assert config.get(StateRecoveryOptions.SAVEPOINT_PATH) is None

    def test_get_optional_ignores_default(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration()
        assert config.get_optional(StateRecoveryOptions.RESTORE_MODE) is None

    def test_reads_string_values(self) -> None:
        from savepoint_restore.contracts import RecoveryClaimMode, StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration(
            {
                "execution.state-recovery.ignore-unclaimed-state": "true",
                "execution.state-recovery.claim-mode": "CLAIM",
            }
        )
        assert config.get(StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE) is True
        assert config.get(StateRecoveryOptions.RESTORE_MODE) is RecoveryClaimMode.CLAIM

    def test_fallback_key_is_honoured(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration({"execution.savepoint.path": "/old/sp"})
        assert config.contains(StateRecoveryOptions.SAVEPOINT_PATH)
        assert config.get(StateRecoveryOptions.SAVEPOINT_PATH) == "/old/sp"

    def test_primary_key_wins_over_fallback(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration(
            {
                "execution.savepoint.path": "/old/sp",
                "execution.state-recovery.path": "/new/sp",
            }
        )
        assert config.get(StateRecoveryOptions.SAVEPOINT_PATH) == "/new/sp"

    def test_malformed_value_raises(self) -> None:
        from savepoint_restore.contracts import (
            IllegalConfigurationError,
            StateRecoveryOptions,
        )
        from savepoint_restore.core import Configuration

        config = Configuration({"execution.state-recovery.claim-mode": "steal"})
        with pytest.raises(IllegalConfigurationError):
            config.get(StateRecoveryOptions.RESTORE_MODE)


class TestConfigurationWrite:
    def test_set_writes_primary_key(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration()
        result = config.set(StateRecoveryOptions.SAVEPOINT_PATH, "/sp")
        assert result is config
        assert "execution.state-recovery.path" in config
        assert config.get(StateRecoveryOptions.SAVEPOINT_PATH) == "/sp"

    def test_set_converts_strings(self) -> None:
        from savepoint_restore.contracts import RecoveryClaimMode, StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration()
        config.set(StateRecoveryOptions.RESTORE_MODE, "legacy")  # type: ignore[arg-type]
        assert config.get(StateRecoveryOptions.RESTORE_MODE) is RecoveryClaimMode.LEGACY

    def test_set_none_rejected(self) -> None:
        from savepoint_restore.contracts import (
            IllegalConfigurationError,
            StateRecoveryOptions,
        )
        from savepoint_restore.core import Configuration

        with pytest.raises(IllegalConfigurationError):
            Configuration().set(StateRecoveryOptions.SAVEPOINT_PATH, None)  # type: ignore[arg-type]

    def test_set_keeps_unrelated_keys(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration({"parallelism.default": "4"})
        config.set(StateRecoveryOptions.SAVEPOINT_PATH, "/sp")
        assert config.to_dict()["parallelism.default"] == "4"

    def test_remove_drops_all_keys(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration(
            {
                "execution.savepoint.path": "/old/sp",
                "execution.state-recovery.path": "/new/sp",
            }
        )
        assert config.remove(StateRecoveryOptions.SAVEPOINT_PATH) is True
        assert not config.contains(StateRecoveryOptions.SAVEPOINT_PATH)
        assert config.remove(StateRecoveryOptions.SAVEPOINT_PATH) is False


class TestConfigurationMapping:
    def test_to_dict_renders_strings(self) -> None:
        from savepoint_restore.contracts import RecoveryClaimMode, StateRecoveryOptions
        from savepoint_restore.core import Configuration

        config = Configuration()
        config.set(StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE, True)
        config.set(StateRecoveryOptions.RESTORE_MODE, RecoveryClaimMode.CLAIM)
        assert config.to_dict() == {
            "execution.state-recovery.ignore-unclaimed-state": "true",
            "execution.state-recovery.claim-mode": "claim",
        }

    def test_copy_is_independent(self) -> None:
        from savepoint_restore.contracts import StateRecoveryOptions
        from savepoint_restore.core import Configuration

        original = Configuration()
        clone = original.copy()
        clone.set(StateRecoveryOptions.SAVEPOINT_PATH, "/sp")
        assert len(original) == 0
        assert len(clone) == 1
        assert original != clone

    def test_equality_and_iteration(self) -> None:
        from savepoint_restore.core import Configuration

        config = Configuration({"a": 1, "b": 2})
        assert config == Configuration({"b": 2, "a": 1})
        assert sorted(config) == ["a", "b"]

    def test_is_not_hashable(self) -> None:
        from savepoint_restore.core import Configuration

        with pytest.raises(TypeError):
            hash(Configuration())
