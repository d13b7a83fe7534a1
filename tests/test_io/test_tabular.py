"""Tests for CSV decode/encode helpers."""

import csv

import pytest

from ctcompare.exceptions import TableDecodeError
from ctcompare.tabular import decode_csv, encode_csv


def test_decode_csv_quoting_and_embedded_delimiters():
    text = 'Label,Markers\n"T cell, CD4+","CD4, IL7R"\n"say ""hi""",x\n'
    rows = decode_csv(text)
    assert rows == [
        {"Label": "T cell, CD4+", "Markers": "CD4, IL7R"},
        {"Label": 'say "hi"', "Markers": "x"},
    ]


def test_decode_csv_short_and_long_rows():
    rows = decode_csv("a,b\n1\n2,3,4\n")
    assert rows == [{"a": "1", "b": ""}, {"a": "2", "b": "3"}]


def test_decode_csv_empty():
    assert decode_csv("") == []
    assert decode_csv("a,b\n") == []


def test_decode_csv_drops_byte_order_mark():
    rows = decode_csv("\ufeffLabel,OBO Ontology ID\nNeuron,\n")
    assert rows == [{"Label": "Neuron", "OBO Ontology ID": ""}]
    assert decode_csv("\ufeff") == []


def test_decode_csv_malformed():
    oversized = "x" * (csv.field_size_limit() + 1)
    with pytest.raises(TableDecodeError, match="Line"):
        decode_csv(f"a,b\n{oversized},2\n")


def test_encode_csv():
    text = encode_csv(
        [{"Label": "T cell, CD4+", "Ontology ID": "CL:0000624"}, {"Label": "B cell", "Ontology ID": ""}],
        ["Label", "Ontology ID"],
    )
    assert text == 'Label,Ontology ID\n"T cell, CD4+",CL:0000624\nB cell,\n'
