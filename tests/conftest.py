# tests/conftest.py
"""
Shared fixtures: small compiled bundles, shaped exactly like the label
compiler's JSON output, for a handful of languages with different
agreement behaviour.
"""

import pytest

from grammaticus import Renderer, TermStore


def _noun_ref(name, form, index=None, capitalize=False):
    ref = {"t": "n", "l": name, "f": form}
    if index is not None:
        ref["i"] = index
    if capitalize:
        ref["c"] = True
    return ref


def _modifier_ref(tag, name, form, an, nt, capitalize=False):
    ref = {"t": tag, "l": name, "f": form, "an": an, "nt": nt}
    if capitalize:
        ref["c"] = True
    return ref


ENGLISH_BUNDLE = {
    "terms": {
        "n": {
            "account": {"t": "n", "l": "account", "s": "v", "v": {"0": "Account", "1": "Accounts"}},
            "opportunity": {"t": "n", "l": "opportunity", "s": "v", "v": {"0": "Opportunity", "1": "Opportunities"}},
            "task": {"t": "n", "l": "task", "s": "c", "v": {"0": "Task", "1": "Tasks"}},
            "world": {"t": "n", "l": "world", "v": {"c": "World"}},
        },
        "d": {
            "a": {"t": "d", "l": "a", "v": {"0-c": "A", "0-v": "An"}},
        },
        "a": {
            "new": {"t": "a", "l": "new", "s": "c", "v": {"0": "New"}},
        },
    },
    "labels": {
        "Sample.hello": ["Hello, ", _noun_ref("world", "c", index=0), "!"],
        "Sample.items": "You have {0} items",
        "Sample.empty": "",
        "Sample.click_here_to_create_new_account": [
            "{0} to create ",
            _modifier_ref("d", "a", "0-c", an=5, nt=3),
            " ",
            _modifier_ref("a", "new", "0", an=5, nt=5),
            " ",
            _noun_ref("account", "0"),
            " now.",
        ],
        "Sample.create": [
            "Create ",
            _modifier_ref("d", "a", "0-c", an=3, nt=3),
            " ",
            _noun_ref("account", "0", index=0),
        ],
        "Sample.task_count": [
            {
                "t": "p",
                "i": 0,
                "def": "{0} records",
                "v": {
                    "one": ["{0} ", _noun_ref("task", "0", index=0)],
                    "other": ["{0} ", _noun_ref("task", "1", index=0)],
                },
            }
        ],
    },
}

FRENCH_BUNDLE = {
    "terms": {
        "n": {
            "compte": {"t": "n", "l": "compte", "g": "m", "s": "c", "v": {"0": "Compte", "1": "Comptes"}},
            "opportunite": {"t": "n", "l": "opportunite", "g": "f", "s": "v",
                            "v": {"0": "Opportunité", "1": "Opportunités"}},
            "tache": {"t": "n", "l": "tache", "g": "f", "s": "c", "v": {"0": "Tâche", "1": "Tâches"}},
        },
        "d": {
            "le": {"t": "d", "l": "le", "v": {
                "0-m-c": "Le ", "0-f-c": "La ", "0-m-v": "L'", "0-f-v": "L'",
                "1-m-c": "Les ", "1-f-c": "Les ", "1-m-v": "Les ", "1-f-v": "Les ",
            }},
        },
        "a": {
            "nouveau": {"t": "a", "l": "nouveau", "s": "c", "v": {
                "0-m-c": "Nouveau", "0-m-v": "Nouvel", "0-f-c": "Nouvelle", "0-f-v": "Nouvelle",
            }},
        },
    },
    "labels": {
        "Sample.edit": [
            "Modifier ",
            _modifier_ref("d", "le", "0-m-c", an=2, nt=2),
            _noun_ref("compte", "0", index=0),
        ],
        "Sample.new": [
            _modifier_ref("d", "le", "0-m-c", an=3, nt=1, capitalize=True),
            _modifier_ref("a", "nouveau", "0-m-c", an=3, nt=3),
            " ",
            _noun_ref("compte", "0", index=0),
        ],
        "Sample.created": [
            _noun_ref("compte", "0", index=0, capitalize=True),
            " ",
            {"t": "g", "an": 0, "def": "créé", "v": {"f": "créée"}},
        ],
        "Sample.count": [
            {
                "t": "p",
                "i": 0,
                "def": "{0}",
                "v": {
                    "one": ["{0} ", _noun_ref("compte", "0", index=0)],
                    "other": ["{0} ", _noun_ref("compte", "1", index=0)],
                },
            }
        ],
        "Sample.records": [
            {
                "t": "p",
                "i": 0,
                "def": "{0} enregistrements",
                "v": {"zero": "Aucun enregistrement", "one": "Un enregistrement"},
            }
        ],
    },
}

GERMAN_BUNDLE = {
    "terms": {
        "n": {
            "account": {"t": "n", "l": "account", "g": "m", "s": "v", "v": {"0-a": "Account", "1-a": "Accounts"}},
            "kampagne": {"t": "n", "l": "kampagne", "g": "f", "s": "c", "v": {"0-a": "Kampagne"}},
            "objekt": {"t": "n", "l": "objekt", "g": "n", "s": "v", "v": {"0-a": "Objekt"}},
        },
        "d": {
            "ein": {"t": "d", "l": "ein", "v": {"m-0-a-c": "Einen", "f-0-a-c": "Eine", "n-0-a-c": "Ein"}},
        },
        "a": {
            "neu": {"t": "a", "l": "neu", "s": "c", "v": {"m-0-a-n": "Neuen", "f-0-a-n": "Neue", "n-0-a-n": "Neues"}},
        },
    },
    "labels": {
        "Sample.create_new": [
            "{0}, um jetzt ",
            _modifier_ref("d", "ein", "m-0-a-c", an=5, nt=3),
            " ",
            _modifier_ref("a", "neu", "m-0-a-n", an=5, nt=5),
            " ",
            _noun_ref("account", "0-a", index=0),
            " zu erstellen.",
        ],
    },
}

JAPANESE_BUNDLE = {
    "terms": {
        "n": {
            "account": {"t": "n", "l": "account", "v": {"0": "取引先"}},
            "opportunity": {"t": "n", "l": "opportunity", "c": "社", "v": {"0": "商談"}},
        },
    },
    "labels": {
        "Sample.there_are": [
            _noun_ref("account", "0", index=0),
            "が{0}",
            {"t": "c", "an": 0},
            "あります",
        ],
    },
}

KOREAN_BUNDLE = {
    "terms": {
        "n": {
            "account": {"t": "n", "l": "account", "s": "c", "v": {"0": "계정"}},
            "contact": {"t": "n", "l": "contact", "s": "v", "v": {"0": "연락처"}},
            "student": {"t": "n", "l": "student", "s": "c", "c": "명", "v": {"0": "학생"}},
        },
        "a": {
            "eul": {"t": "a", "l": "eul", "v": {"c": "을", "v": "를"}},
        },
    },
    "labels": {
        "Sample.create": [
            "지금 ",
            _noun_ref("account", "0", index=0),
            _modifier_ref("a", "eul", "c", an=1, nt=1),
            " 작성합니다.",
        ],
        "Sample.count": [
            "{0} ",
            {"t": "c", "an": 3},
            "의 ",
            _noun_ref("account", "0", index=0),
        ],
    },
}


@pytest.fixture
def english_bundle():
    return ENGLISH_BUNDLE


@pytest.fixture
def english_store():
    return TermStore.from_bundle(ENGLISH_BUNDLE)


@pytest.fixture
def english(english_store):
    return Renderer.for_locale(english_store, "en")


@pytest.fixture
def french():
    return Renderer.for_locale(TermStore.from_bundle(FRENCH_BUNDLE), "fr")


@pytest.fixture
def german():
    return Renderer.for_locale(TermStore.from_bundle(GERMAN_BUNDLE), "de")


@pytest.fixture
def japanese():
    return Renderer.for_locale(TermStore.from_bundle(JAPANESE_BUNDLE), "ja")


@pytest.fixture
def korean():
    return Renderer.for_locale(TermStore.from_bundle(KOREAN_BUNDLE), "ko")
