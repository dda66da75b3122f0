import pytest

from mrp import demand
from mrp.errors import PartNotFoundError

from .conftest import stock_of


def test_explode_leaf_takes_whole_quantity(conn):
    assert demand.explode(conn, 'BOLT', 5) == {'BOLT': 5}


def test_explode_non_positive_quantity_adds_nothing(conn):
    assert demand.explode(conn, 'SUB-ARM', 0) == {}
    assert demand.explode(conn, 'BOLT', -3) == {}


def test_explode_assembly_covered_by_stock(conn):
    assert demand.explode(conn, 'SUB-ARM', 1) == {}


def test_explode_nets_assembly_stock_before_descending(conn):
    # 4 arms wanted, 1 in stock: build 3
    assert demand.explode(conn, 'SUB-ARM', 4) == {'MOTOR': 3, 'BOLT': 18}


def test_explode_accumulates_into_given_map(conn):
    needed = {'BOLT': 2}
    result = demand.explode(conn, 'SUB-BASE', 1, needed)
    assert result is needed
    assert needed == {'BOLT': 10, 'PLATE': 1, 'WHEEL': 4}


def test_analyze_demand_aggregates_leaf_parts(conn):
    result = demand.analyze_demand(conn, 'SUB-BOT', 3)

    assert result.target.sku == 'SUB-BOT'
    assert result.target.need == 2
    assert result.target.stock == 1
    assert result.target.description == 'Robot'

    needs = {line.sku: line.need for line in result.components}
    assert needs == {'MOTOR': 3, 'BOLT': 42, 'PLATE': 2, 'WHEEL': 8}


def test_analyze_demand_reports_component_stock(conn):
    result = demand.analyze_demand(conn, 'SUB-BOT', 3)
    lines = {line.sku: line for line in result.components}

    assert lines['MOTOR'].stock == 2
    assert not lines['MOTOR'].sufficient
    assert lines['BOLT'].sufficient
    assert not lines['WHEEL'].sufficient
    assert lines['PLATE'].description == 'Base plate'


def test_analyze_demand_when_stock_covers_target(conn):
    result = demand.analyze_demand(conn, 'SUB-BOT', 1)

    assert len(result.lines) == 1
    assert result.target.need == 0


def test_analyze_demand_frame_columns(conn):
    frame = demand.analyze_demand(conn, 'SUB-BOT', 3).to_frame()

    assert list(frame.columns) == ['SKU', 'Need', 'Stock', 'Description']
    assert frame.iloc[0].tolist() == ['SUB-BOT', 2, 1, 'Robot']
    assert len(frame) == 5


def test_analyze_demand_does_not_touch_stock(conn):
    demand.analyze_demand(conn, 'SUB-BOT', 10)
    assert stock_of(conn, 'BOLT') == 100
    assert stock_of(conn, 'SUB-BOT') == 1


def test_analyze_demand_rejects_bad_input(conn):
    with pytest.raises(ValueError):
        demand.analyze_demand(conn, 'SUB-BOT', 0)
    with pytest.raises(PartNotFoundError):
        demand.analyze_demand(conn, 'SUB-NOPE', 1)
