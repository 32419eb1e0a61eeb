import pytest

pytest.importorskip("rdkit")

from ringlocant.presentation.cli.number_rings import main, read_smiles_file


def test_numbers_smiles_from_arguments(capsys):
    assert main(["c1ccc2ncccc2c1"]) == 0

    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    smiles, index, topology, locants = out[0].split("\t")
    assert (smiles, index, topology) == ("c1ccc2ncccc2c1", "0", "bicyclic")
    assert locants.split()[0] == "N1"
    assert "C8a" in locants.split()


def test_unsupported_systems_get_placeholders(capsys):
    assert main(["c1ccccc1"]) == 0
    out = capsys.readouterr().out
    assert "fallback" in out
    assert "CX1 CX2 CX3 CX4 CX5 CX6" in out


def test_bad_smiles_is_reported_and_skipped(capsys):
    assert main(["not-a-smiles", "c1ccc2ccccc2c1"]) == 1
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("c1ccc2ccccc2c1\t")


def test_input_file(tmp_path, capsys):
    smiles_file = tmp_path / "molecules.smi"
    smiles_file.write_text("# header\nc1ccc2ccccc2c1 naphthalene\n\nc1ccc2ncccc2c1\n")

    assert read_smiles_file(smiles_file) == ["c1ccc2ccccc2c1", "c1ccc2ncccc2c1"]
    assert main(["--input", str(smiles_file)]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 2


def test_no_input_is_an_error():
    with pytest.raises(SystemExit):
        main([])


def test_numbering_failure_sets_exit_status(capsys):
    # adamantane is all six-membered rings but cannot be laid out flat
    assert main(["C1C2CC3CC1CC(C2)C3"]) == 1
    assert capsys.readouterr().out == ""


def test_numbering_failure_does_not_stop_the_batch(capsys):
    assert main(["C1C2CC3CC1CC(C2)C3", "c1ccc2ccccc2c1"]) == 1
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("c1ccc2ccccc2c1\t")
