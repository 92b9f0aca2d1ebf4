import io

import pytest

from extsearch.binary_tree_file import search_tree
from extsearch.cli import main
from extsearch.record import RECORD_SIZE, read_records


def _run(monkeypatch, capsys, tmp_path, choices, records=20, key=None):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{c}\n" for c in choices)))
    argv = [
        "--data-file",
        str(tmp_path / "data.bin"),
        "--tree-file",
        str(tmp_path / "tree.bin"),
        "--records",
        str(records),
    ]
    if key is not None:
        argv += ["--key", str(key)]
    code = main(argv)
    return code, capsys.readouterr().out


def test_exit_option(monkeypatch, capsys, tmp_path):
    code, out = _run(monkeypatch, capsys, tmp_path, ["0"])
    assert code == 0
    assert "Saindo..." in out
    assert "==== Gerenciador de Arquivos ====" in out


def test_end_of_input_stops_loop(monkeypatch, capsys, tmp_path):
    code, out = _run(monkeypatch, capsys, tmp_path, [])
    assert code == 0
    assert "Saindo..." not in out


@pytest.mark.parametrize("choice", ["9", "abc", "-3"])
def test_invalid_option(monkeypatch, capsys, tmp_path, choice):
    _, out = _run(monkeypatch, capsys, tmp_path, [choice, "0"])
    assert "Opção inválida. Tente novamente." in out


def test_generate_common_file(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["1", "0"], records=20)
    assert "Arquivo gerado com sucesso" in out
    path = tmp_path / "data.bin"
    assert path.stat().st_size == 20 * RECORD_SIZE
    with open(path, "rb") as stream:
        assert [r.key for r in read_records(stream)] == list(range(20))


def test_generate_common_file_failure(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))
    main(["--data-file", str(tmp_path / "missing" / "data.bin"), "--records", "3"])
    out = capsys.readouterr().out
    assert "Falha ao gerar arquivo" in out


def test_binary_tree_file(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["1", "2", "0"], records=15)
    assert "Árvore binária gerada com sucesso!" in out
    assert "Registros inseridos: 15" in out
    assert "Processados: 10 registros" in out
    assert "Registros duplicados ignorados" not in out
    with open(tmp_path / "tree.bin", "rb") as stream:
        for key in range(15):
            found = search_tree(key, stream)
            assert found is not None and found.key == key
        assert search_tree(15, stream) is None


def test_binary_tree_without_data_file(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["2", "0"])
    assert "Erro ao abrir o arquivo comum para leitura" in out


def test_btree_searches(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["1", "3", "0"], records=2)
    assert "Pesquisando chave 1: ENCONTRADA!" in out
    assert "Pesquisando chave 91299: NÃO ENCONTRADA" in out
    assert "Pesquisando chave 750000: NÃO ENCONTRADA" in out


def test_btree_without_data_file(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["3", "0"])
    assert "Erro ao abrir o arquivo comum para leitura" in out
    assert "Pesquisando" not in out


def test_sequential_search_found(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["1", "4", "0"], records=20, key=7)
    assert "Registro encontrado!" in out
    assert "Chave: 7" in out


def test_sequential_search_missing(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["1", "4", "0"], records=20, key=20)
    assert "Registro nao encontrado." in out


def test_sequential_search_without_file(monkeypatch, capsys, tmp_path):
    _, out = _run(monkeypatch, capsys, tmp_path, ["4", "0"])
    assert "Erro na abertura do arquivo" in out


def test_negative_record_count_rejected(tmp_path):
    with pytest.raises(SystemExit):
        main(["--records", "-1", "--data-file", str(tmp_path / "d.bin")])