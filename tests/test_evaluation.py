import json

import pytest

from rc5lab.cipher.cryptanalysis import (
    _flip_bit,
    _hamming_distance_bytes,
    avalanche_key,
    avalanche_plaintext,
    evaluate_cipher,
    score_avalanche,
)
from rc5lab.cipher.spec import RC5Spec
from rc5lab.evaluation import (
    EvaluationReport,
    SACResult,
    compute_sac,
    evaluate_full,
    run_all_configs,
    run_key_length_sweep,
    run_known_answers,
    run_roundtrip_tests,
)


def test_hamming_and_flip():
    assert _hamming_distance_bytes(b"\x00\xff", b"\x01\x0f") == 5
    assert _flip_bit(b"\x00\x00", 9) == b"\x00\x02"
    with pytest.raises(IndexError):
        _flip_bit(b"\x00", 8)


def test_roundtrip_result_is_perfect(rc5_32_12_16):
    result = run_roundtrip_tests(rc5_32_12_16, num_vectors=200, seed=42)
    assert result.is_perfect
    assert result.passed == 200
    assert result.success_rate == 1.0
    assert result.summary().startswith("[PASS] RC5-32/12/16")


def test_key_length_sweep_covers_domain():
    results = run_key_length_sweep(16, 8, key_lengths=(0, 1, 2, 3, 100, 255), num_vectors=10)
    assert [r.key_bytes for r in results] == [0, 1, 2, 3, 100, 255]
    assert all(r.is_perfect for r in results)


def test_run_all_configs_reports_progress():
    seen = []
    results = run_all_configs(num_vectors=20, progress_callback=lambda name, i, n: seen.append(name))
    assert seen == ["RC5-16/16/8", "RC5-32/12/16", "RC5-32/20/16", "RC5-64/24/24"]
    assert all(r.is_perfect for r in results)


def test_known_answers_all_pass():
    results = run_known_answers()
    assert len(results) == 8
    assert all(r.passed for r in results)
    only_paper = run_known_answers(config="rc5-32/12/16")
    assert len(only_paper) == 5


def test_avalanche_close_to_half(rc5_32_12_16):
    pt = avalanche_plaintext(rc5_32_12_16, trials=200)
    kk = avalanche_key(rc5_32_12_16, trials=200)
    assert 0.4 < pt["mean"] < 0.6
    assert 0.4 < kk["mean"] < 0.6


def test_zero_round_diffusion_is_weak():
    spec = RC5Spec(word_bits=32, rounds=0, key_bytes=16)
    assert avalanche_plaintext(spec, trials=200)["mean"] < 0.2


def test_score_avalanche():
    assert score_avalanche(0.5) == 1.0
    assert score_avalanche(0.0) == 0.0
    assert score_avalanche(1.0) == 0.0


def test_evaluate_cipher_shape(rc5_32_12_16):
    metrics = evaluate_cipher(rc5_32_12_16, trials=50)
    assert metrics["config"] == "RC5-32/12/16"
    assert metrics["block_size_bits"] == 64
    assert set(metrics["scores"]) == {"plaintext_avalanche", "key_avalanche"}


def test_sac_statistics(rc5_32_12_16):
    result = compute_sac(rc5_32_12_16, input_type="plaintext", trials=100)
    assert result.num_input_bits == 64
    assert len(result.per_input_bit_mean) == 64
    assert 0.4 < result.global_mean < 0.6
    assert result.min_bit_prob <= result.global_mean <= result.max_bit_prob


def test_sac_key_input(rc5_32_12_16):
    result = compute_sac(rc5_32_12_16, input_type="key", trials=20)
    assert result.num_input_bits == 128
    assert 0.4 < result.global_mean < 0.6


def test_sac_rejects_unknown_input_type(rc5_32_12_16):
    with pytest.raises(ValueError):
        compute_sac(rc5_32_12_16, input_type="tweak", trials=1)


def test_evaluate_full_report_serializes(rc5_32_12_16):
    stages = []
    report = evaluate_full(
        rc5_32_12_16,
        num_vectors=50,
        sac_trials=10,
        progress_callback=lambda stage, i, n: stages.append(stage),
    )
    assert isinstance(report, EvaluationReport)
    assert report.all_pass
    assert stages == ["known answers", "roundtrip", "avalanche", "SAC (plaintext)", "SAC (key)"]
    data = json.loads(json.dumps(report.to_dict()))
    assert data["summary"]["kat_all_pass"] is True
    assert data["summary"]["failing_configs"] == []
    assert data["summary"]["weak_sac_configs"] == report.weak_sac_configs()
    assert "Known-answer vectors: 5/5 pass" in report.to_summary()


def test_evaluate_full_empty_key_without_sac():
    spec = RC5Spec(word_bits=16, rounds=12, key_bytes=0)
    stages = []
    report = evaluate_full(
        spec, num_vectors=20, sac_trials=0, sweep_keys=True,
        progress_callback=lambda stage, i, n: stages.append(stage),
    )
    assert stages == ["known answers", "roundtrip"]
    assert report.avalanche is None
    assert report.kat_results == []
    assert report.sac_results == []
    assert len(report.roundtrip_results) > 1
    assert report.all_pass


def test_weak_sac_configs_listed_in_summary():
    weak = SACResult(config="RC5-32/0/16", input_type="plaintext", num_trials=10,
                     num_input_bits=64, num_output_bits=64, sac_deviation=0.4, min_bit_prob=0.01)
    strong = SACResult(config="RC5-32/12/16", input_type="plaintext", num_trials=10,
                       num_input_bits=64, num_output_bits=64, sac_deviation=0.01, min_bit_prob=0.45)
    report = EvaluationReport(sac_results=[weak, strong])
    assert report.weak_sac_configs() == ["RC5-32/0/16"]
    assert report.to_dict()["summary"]["weak_sac_configs"] == ["RC5-32/0/16"]
