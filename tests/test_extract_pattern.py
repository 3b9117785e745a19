from conftest import run


def test_log_sample_extract_verify_and_corrupt(tmp_path):
    sample_dir = tmp_path / "sample"
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    r = run(["tools/sample_logs.py", str(sample_dir), "--count", "3", "--gpu", "--timestamps"])
    assert r.returncode == 0, r.stderr + r.stdout

    log = sample_dir / "Xorg.0.log"
    index = out_dir / "edids.parquet"
    r = run([
        "-m", "edid_extract.cli",
        "-E", str(log),
        "--extract-edids-output-file", str(out_dir / "edid.bin"),
        "--index", str(index),
    ])
    assert r.returncode == 0, r.stderr + r.stdout
    assert f'Found 3 EDIDs in "{log}".' in r.stdout

    written = [out_dir / "edid.bin", out_dir / "edid.bin.0", out_dir / "edid.bin.1"]
    refs = sorted((sample_dir / "reference").glob("*.bin"))
    assert len(refs) == 3
    for got, ref in zip(written, refs):
        assert got.read_bytes() == ref.read_bytes()
        assert got.stat().st_size == 128

    r = run(["-m", "edid_verify.cli", "index", str(index)])
    assert r.returncode == 0, r.stderr + r.stdout
    assert '"status":"PASS"' in r.stdout

    r = run(["examples/query.py", str(index), "Sample 1"])
    assert r.returncode == 0, r.stderr + r.stdout
    assert "Sample 1 (DFP-1)" in r.stdout
    assert "Sample 2" not in r.stdout

    # Corrupt and ensure failure
    r = run(["scripts/corrupt_one_byte.py", str(out_dir / "edid.bin.0")])
    assert r.returncode == 0, r.stderr + r.stdout

    r = run(["-m", "edid_verify.cli", "index", str(index)])
    assert r.returncode != 0
    assert "E_HASH_MISMATCH" in r.stdout


def test_text_sample_extract(tmp_path):
    sample_dir = tmp_path / "sample"
    r = run(["tools/sample_logs.py", str(sample_dir), "--text"])
    assert r.returncode == 0, r.stderr + r.stdout

    out = tmp_path / "panel.bin"
    r = run(["-m", "edid_extract.cli", "-E", str(sample_dir / "edid.txt"),
             "--extract-edids-output-file", str(out)])
    assert r.returncode == 0, r.stderr + r.stdout
    assert 'Wrote EDID for "Sample 0"' in r.stdout
    assert out.read_bytes() == (sample_dir / "reference" / "00.bin").read_bytes()


def test_repeated_extraction_does_not_overwrite(tmp_path):
    sample_dir = tmp_path / "sample"
    run(["tools/sample_logs.py", str(sample_dir)])
    log = sample_dir / "Xorg.0.log"

    for _ in range(2):
        r = run(["-m", "edid_extract.cli", "-E", str(log)], cwd=tmp_path)
        assert r.returncode == 0, r.stderr + r.stdout

    assert (tmp_path / "edid.bin").read_bytes() == (tmp_path / "edid.bin.0").read_bytes()


def test_missing_input_fails_closed(tmp_path):
    r = run(["-m", "edid_extract.cli", "-E", str(tmp_path / "missing.log")])
    assert r.returncode == 1
    assert r.stdout.startswith("FATAL: Unable to open file")


def test_directory_input_fails_closed(tmp_path):
    r = run(["-m", "edid_extract.cli", "-E", str(tmp_path)])
    assert r.returncode == 1
    assert r.stdout.startswith("FATAL: Unable to open file")
    assert "Traceback" not in r.stderr


def test_empty_output_filename_fails_closed(tmp_path):
    log = tmp_path / "Xorg.0.log"
    log.write_bytes(
        b"(--) NVIDIA(0): Raw EDID bytes:\n"
        b"(--) NVIDIA(0):   00 ff ff ff\n"
        b"(II) NVIDIA(0): Setting mode\n"
    )
    r = run(["-m", "edid_extract.cli", "-E", str(log), "--extract-edids-output-file", ""],
            cwd=tmp_path)
    assert r.returncode == 1
    assert "FATAL: Output filename must not be empty." in r.stdout
    assert list(tmp_path.glob("edid.bin*")) == []


def test_every_failed_write_is_reported(tmp_path):
    log = tmp_path / "Xorg.0.log"
    log.write_bytes(
        b"(--) NVIDIA(0): Raw EDID bytes:\n"
        b"(--) NVIDIA(0):   00 ff ff ff\n" * 3
        + b"(II) NVIDIA(0): Setting mode\n"
    )
    r = run(["-m", "edid_extract.cli", "-E", str(log),
             "--extract-edids-output-file", str(tmp_path / "missing" / "edid.bin")])
    assert r.returncode == 1
    assert 'Found 3 EDIDs in' in r.stdout
    assert r.stderr.count("UserWarning: Failed to write EDID") == 3
