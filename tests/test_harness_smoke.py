import csv
import json
import re

import pytest
from bitwordle.engine import Lexicon, WordCharError, WordLengthError, compute_pattern
from bitwordle.harness import GameSimulator, run_case, run_batch, write_csv, write_manifest
from bitwordle.harness.io import timestamp_id

WORDS = ["mambo", "mamba", "mango", "bombs", "combo", "jumbo", "limbo", "crane",
         "slate", "pizza", "gumbo", "manor", "macho", "mocha"]


@pytest.fixture
def lex():
    return Lexicon.from_strings(WORDS)


def test_simulator_process(lex):
    sim = GameSimulator("mambo", lex)
    assert sim.snapshot.count == len(WORDS)
    assert not sim.finished

    step = sim.process("bombs\n")
    assert step.guess == "bombs"
    assert str(step.pattern) == "B:Y O:Y M:G B:G S:B"
    assert step.snapshot.count == 4
    assert sim.remaining() == ["mambo", "jumbo", "limbo", "gumbo"]
    assert not sim.finished


def test_rejected_guess_leaves_state_alone(lex):
    sim = GameSimulator("mambo", lex)
    sim.process("bombs")
    before = sim.snapshot
    with pytest.raises(WordLengthError):
        sim.process("bomb")
    with pytest.raises(WordCharError):
        sim.process("b0mbs")
    assert sim.snapshot is before
    assert len(sim.history) == 1


def test_exact_guess_solves(lex):
    sim = GameSimulator("Mambo", lex)
    step = sim.process("  MAMBO ")
    assert str(step.pattern) == "M:G A:G M:G B:G O:G"
    assert step.snapshot.solved and sim.finished
    assert step.snapshot.words == ("mambo",)


def test_target_outside_dictionary_goes_inconsistent(lex):
    sim = GameSimulator("zesty", lex)
    step = sim.process("zesty")
    assert step.snapshot.count == 0
    assert step.snapshot.inconsistent and sim.finished


def test_bad_target_raises(lex):
    with pytest.raises(WordLengthError):
        GameSimulator("mam", lex)


@pytest.mark.parametrize("condense", [False, True])
def test_run_case_stops_at_one_candidate(lex, condense):
    r = run_case("mambo", ["crane", "bombs", "jumbo", "mambo"], lex, condense=condense)
    assert r["answer"] == "mambo"
    assert r["solved"] is True and r["inconsistent"] is False
    assert r["guesses"] == 2
    assert r["history"] == [("crane", "BBYBB", 3), ("bombs", "YYGGB", 1)]


def test_run_batch(lex):
    out = run_batch(["mambo", "limbo"], ["bombs"], lex)
    assert [r["answer"] for r in out] == ["mambo", "limbo"]
    # same pattern for both targets, so the same four candidates remain
    assert [r["remaining"] for r in out] == [4, 4]
    assert not any(r["solved"] for r in out)


def test_run_batch_sample_is_seeded(lex):
    a = run_batch(WORDS, ["bombs"], lex, sample=3, seed=7)
    b = run_batch(WORDS, ["bombs"], lex, sample=3, seed=7)
    assert len(a) == 3
    assert [r["answer"] for r in a] == [r["answer"] for r in b]
    assert set(r["answer"] for r in a) <= set(WORDS)
    # a sample at least as large as the pool keeps every target, in order
    full = run_batch(WORDS[:4], ["bombs"], lex, sample=10, seed=7)
    assert [r["answer"] for r in full] == WORDS[:4]


def test_run_batch_progress_and_callback(lex, capsys):
    seen = []
    out = run_batch(["mambo", "crane", "slate"], ["crane"], lex, progress=True,
                    on_case=lambda done, total: seen.append((done, total)))
    assert len(out) == 3
    assert seen == [(1, 3), (2, 3), (3, 3)]
    assert "Running" in capsys.readouterr().err


def test_process_scores_each_guess_once(lex, monkeypatch):
    import bitwordle.engine.universe as universe_mod
    import bitwordle.harness.core as core_mod

    calls = []

    def counting(target, guess):
        calls.append(guess)
        return compute_pattern(target, guess)

    monkeypatch.setattr(core_mod, "compute_pattern", counting)
    monkeypatch.setattr(universe_mod, "compute_pattern", counting)
    sim = GameSimulator("mambo", lex)
    sim.process("bombs")
    sim.process("jumbo")
    assert len(calls) == 2


def test_write_outputs(lex, tmp_path):
    results = run_batch(["mambo", "crane"], ["crane", "bombs"], lex)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=2)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["mambo", "crane"]
    assert rows[0]["patt_1"] == "BBYBB" and rows[0]["left_2"] == "1"
    # crane is solved by the first guess, so the second column stays empty
    assert rows[1]["patt_1"] == "GGGGG" and rows[1]["guess_2"] == ""

    m = write_manifest({"run_id": timestamp_id(), "num_cases": 2}, str(tmp_path / "m.json"))
    data = json.loads(open(m, encoding="utf-8").read())
    assert data["num_cases"] == 2
    assert re.fullmatch(r"\d{8}T\d{6}Z", data["run_id"])
