"""Tests for the store extractor."""

from __future__ import annotations

import textwrap

import pytest

from appdocs.extractors.base import Matched, NoMatch
from appdocs.extractors.stores import (
    StoreExtractor,
    action_parameters,
    first_declaration_body,
    is_store_candidate,
    persistence_config,
    shape_body,
)
from appdocs.models import ActionRecord, PersistenceConfig, StateField
from appdocs.source_scanner import SourceScanner
from tests._fixtures.project_builder import ProjectBuilder


def test_state_interface_is_partitioned_into_state_and_actions() -> None:
    text = "interface FooState { count: number; increment: () => void }\n"
    records = StoreExtractor().extract_text(text, "fooStore.ts")

    assert len(records) == 1
    record = records[0]
    assert record.name == "fooStore"
    assert record.state == (StateField(name="count", type="number"),)
    assert record.actions == (ActionRecord(name="increment", parameters=""),)
    assert record.persistence is None


@pytest.mark.parametrize(
    ("path", "text", "expected"),
    [
        ("authStore.ts", "", True),
        ("ui/SessionStore.ts", "", True),
        ("session.ts", "import { create } from 'zustand';\nexport const useS = create(() => ({}));", True),
        ("session.ts", "const create = () => null;\ncreate();", False),
        ("helpers.ts", "export const clamp = (n: number) => n;", False),
    ],
)
def test_is_store_candidate(path: str, text: str, expected: bool) -> None:
    assert is_store_candidate(path, text) is expected


def test_non_store_file_yields_no_record() -> None:
    assert StoreExtractor().extract_text("export const x = 1;\n", "utils.ts") == []


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("() => void", ""),
        ("(id: string, force?: boolean) => Promise<void>", "id: string, force?: boolean"),
        ("async (email) => { return true; }", "email"),
        ("(() => void) | null", None),
        ("string", None),
        ("Record<string, number>", None),
    ],
)
def test_action_parameters(expression: str, expected: str | None) -> None:
    assert action_parameters(expression) == expected


def test_set_and_get_are_never_reported() -> None:
    text = textwrap.dedent(
        """
        interface ThemeStore {
          theme: string;
          set: (partial: Partial<ThemeStore>) => void;
          get: () => ThemeStore;
          toggle: () => void;
        }
        """
    )
    record = StoreExtractor().extract_text(text, "themeStore.ts")[0]
    assert [field.name for field in record.state] == ["theme"]
    assert [action.name for action in record.actions] == ["toggle"]


def test_persistence_options_are_read_from_persist_call() -> None:
    text = textwrap.dedent(
        """
        export const usePrefs = create(
          persist(
            (set) => ({ dark: false, toggle: () => set((s) => ({ dark: !s.dark })) }),
            { name: "prefs", storage: createJSONStorage(() => sessionStorage) }
          )
        );
        """
    )
    assert persistence_config(text) == PersistenceConfig(
        storage_key="prefs", backend="sessionStorage", partial=False
    )


def test_persist_without_options_defaults_backend() -> None:
    assert persistence_config("persist((set) => ({}))") == PersistenceConfig(storage_key="")


def test_sample_project_stores(sample_project: ProjectBuilder) -> None:
    sources = SourceScanner().iter_stores(sample_project.path("src/store"))
    records = {record.name: record for record in StoreExtractor().extract_all(sources)}

    assert set(records) == {"useAuthStore", "useCounterStore"}

    auth = records["useAuthStore"]
    assert auth.description == "Authentication session."
    assert auth.state == (
        StateField(name="user", type="User | null"),
        StateField(name="isAuthenticated", type="boolean"),
    )
    assert auth.actions == (
        ActionRecord(name="login", parameters="email: string, password: string"),
        ActionRecord(name="logout", parameters=""),
    )
    assert auth.persistence == PersistenceConfig(
        storage_key="auth-storage", backend="sessionStorage", partial=True
    )

    counter = records["useCounterStore"]
    assert counter.description == "State store useCounterStore"
    assert counter.state == (StateField(name="count", type="0"), StateField(name="step", type="1"))
    assert [action.name for action in counter.actions] == ["increment", "reset"]
    assert counter.persistence is None


def test_state_and_actions_partition_declared_members(sample_project: ProjectBuilder) -> None:
    sources = SourceScanner().iter_stores(sample_project.path("src/store"))
    for record in StoreExtractor().extract_all(sources):
        state_names = {field.name for field in record.state}
        action_names = {action.name for action in record.actions}
        assert state_names.isdisjoint(action_names)
        assert not {"set", "get"} & (state_names | action_names)


_IMPORTED_SHAPE_STORE = textwrap.dedent(
    """
    import { create } from 'zustand';
    import type { CounterState } from './types';

    interface Toast {
      id: string;
    }

    export const useCounterStore = create<CounterState>()((set) => ({
      count: 0,
      inc: () => set((s) => ({ count: s.count + 1 })),
    }));
    """
)


def test_imported_shape_falls_back_to_initializer_literal() -> None:
    record = StoreExtractor().extract_text(_IMPORTED_SHAPE_STORE, "counterStore.ts")[0]

    assert record.name == "useCounterStore"
    assert record.state == (StateField(name="count", type="0"),)
    assert [action.name for action in record.actions] == ["inc"]


def test_unrelated_interface_is_not_taken_as_store_shape() -> None:
    assert isinstance(shape_body(_IMPORTED_SHAPE_STORE), NoMatch)
    assert isinstance(first_declaration_body(_IMPORTED_SHAPE_STORE), Matched)


def test_first_declaration_used_when_no_initializer_literal() -> None:
    text = textwrap.dedent(
        """
        interface Session {
          token: string;
          refresh: () => Promise<void>;
        }
        """
    )
    record = StoreExtractor().extract_text(text, "sessionStore.ts")[0]
    assert record.state == (StateField(name="token", type="string"),)
    assert record.actions == (ActionRecord(name="refresh", parameters=""),)
