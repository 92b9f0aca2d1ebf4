"""Interactive menu for generating and searching the data files."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from extsearch.binary_tree_file import create_binary_tree_file, insert_into_tree
from extsearch.btree import BTree
from extsearch.generator import generate_file
from extsearch.record import read_records
from extsearch.sequential_search import build_page_index, indexed_search

COMMON_FILE = "dados.bin"
BINARY_TREE_FILE = "filebinarytree.bin"
DEFAULT_RECORDS = 1_000_000
DEFAULT_SEARCH_KEY = 91299
BTREE_TEST_KEYS = (91299, 123456, 999999, 1, 500000, 750000)
PROGRESS_EVERY = 10

_MENU = (
    "\n==== Gerenciador de Arquivos ====\n"
    "1. Gerar arquivo comum\n"
    "2. Gerar arquivo de árvore binária\n"
    "3. Gerar árvore B\n"
    "4. Busca sequencial em arquivo comum\n"
    "0. Sair"
)


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="extsearch",
        description="Generate a record file and search it in several ways.",
    )
    parser.add_argument("--data-file", default=COMMON_FILE)
    parser.add_argument("--tree-file", default=BINARY_TREE_FILE)
    parser.add_argument("--records", type=_non_negative, default=DEFAULT_RECORDS)
    parser.add_argument("--key", type=int, default=DEFAULT_SEARCH_KEY)
    return parser.parse_args(argv)


def _generate_common_file(args: argparse.Namespace) -> None:
    print(">> Gerando arquivo comum...")
    try:
        generate_file(args.records, args.data_file)
    except OSError:
        print("Erro ao abrir arquivos.")
        print("Falha ao gerar arquivo")
    else:
        print("Arquivo gerado com sucesso")


def _generate_binary_tree_file(args: argparse.Namespace) -> None:
    print(">> Gerando arquivo de árvore binária...")
    try:
        create_binary_tree_file(args.tree_file)
    except OSError:
        print("\nNão foi possível gerar o arquivo")
        return

    try:
        common = open(args.data_file, "rb")
    except OSError:
        print("Erro ao abrir o arquivo comum para leitura")
        return

    with common:
        try:
            tree = open(args.tree_file, "r+b")
        except OSError:
            print("Erro ao abrir o arquivo da árvore binária")
            return
        with tree:
            inserted = duplicated = 0
            print(
                "Lendo registros do arquivo comum e inserindo na árvore binária..."
            )
            for record in read_records(common):
                if insert_into_tree(record, tree):
                    inserted += 1
                else:
                    duplicated += 1
                processed = inserted + duplicated
                if processed % PROGRESS_EVERY == 0:
                    print(f"Processados: {processed} registros")

    print("Árvore binária gerada com sucesso!")
    print(f"Registros inseridos: {inserted}")
    if duplicated:
        print(f"Registros duplicados ignorados: {duplicated}")


def _generate_btree(args: argparse.Namespace) -> None:
    print(">> Gerando arquivo de árvore B...\n")
    try:
        common = open(args.data_file, "rb")
    except OSError:
        print("Erro ao abrir o arquivo comum para leitura")
        return

    tree = BTree()
    with common:
        for record in read_records(common):
            tree.insert(record.key)

    for key in BTREE_TEST_KEYS:
        verdict = "ENCONTRADA!" if key in tree else "NÃO ENCONTRADA"
        print(f"Pesquisando chave {key}: {verdict}")


def _sequential_search(args: argparse.Namespace) -> None:
    print(">> Executando busca sequencial...")
    try:
        data = open(args.data_file, "rb")
    except OSError:
        print("Erro na abertura do arquivo")
        return

    with data:
        try:
            index = build_page_index(data)
        except ValueError as exc:
            print(f"Erro: {exc}")
            return
        found = indexed_search(index, args.key, data)

    if found is None:
        print("Registro nao encontrado.")
    else:
        print("Registro encontrado!")
        print(f"Chave: {found.key}")


_ACTIONS = {
    1: _generate_common_file,
    2: _generate_binary_tree_file,
    3: _generate_btree,
    4: _sequential_search,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu loop until the user chooses 0 or input ends."""
    args = _parse_args(argv)
    while True:
        print(_MENU)
        try:
            answer = input("Escolha uma opção: ")
        except EOFError:
            print()
            return 0
        try:
            option = int(answer.strip())
        except ValueError:
            option = -1
        if option == 0:
            print("Saindo...")
            return 0
        action = _ACTIONS.get(option)
        if action is None:
            print("Opção inválida. Tente novamente.")
        else:
            action(args)