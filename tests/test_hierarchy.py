from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from bookpricing.pricing import (
    HIERARCHY_CLASSES,
    DigitalBook,
    InheritanceBook,
    PhysicalBook,
    TaxedDigitalBook,
    TaxedPhysicalBook,
)


def test_base_book_returns_base_value(base_value):
    assert InheritanceBook("Plain", base_value).final_price() == base_value


def test_physical_adds_surcharge(base_value):
    assert PhysicalBook("Paper", base_value).final_price() == Decimal("115.00")


def test_digital_inherits_base_price(base_value):
    assert DigitalBook("Ebook", base_value).final_price() == Decimal("100.00")


def test_taxed_physical(base_value):
    assert TaxedPhysicalBook("Java Inheritance", base_value).final_price() == Decimal("126.50")


def test_taxed_digital(base_value):
    assert TaxedDigitalBook("Ebook Inheritance", base_value).final_price() == Decimal("110.00")


def test_tax_step_is_declared_separately_per_branch():
    assert "final_price" in TaxedPhysicalBook.__dict__
    assert "final_price" in TaxedDigitalBook.__dict__
    assert not issubclass(TaxedDigitalBook, TaxedPhysicalBook)
    assert "final_price" not in DigitalBook.__dict__


def test_lattice_has_one_class_per_combination():
    assert len(HIERARCHY_CLASSES) == 4
    assert len(set(HIERARCHY_CLASSES.values())) == 4


def test_books_are_immutable(base_value):
    book = TaxedPhysicalBook("Java Inheritance", base_value)
    with pytest.raises(FrozenInstanceError):
        book.base_value = Decimal("1")


def test_numeric_inputs_are_converted():
    assert PhysicalBook("Paper", 100).final_price() == Decimal("115")
    assert TaxedDigitalBook("Ebook", 19.99).final_price() == Decimal("21.989")
