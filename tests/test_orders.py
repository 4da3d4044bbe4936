import pytest
from pydantic import ValidationError

from roofmetrics.core.coverage import (
    COVERAGE_RULES, coverage_rule, packages_needed, nails_needed,
)
from roofmetrics.core.ordering import MaterialOrderBuilder, calculate_material_order
from roofmetrics.core.registry import create_order_registry
from roofmetrics.models import (
    RoofMetrics, OrderParams, RoofComplexity, NailPattern, Accessory,
)


def test_moderate_order_quantities(sample_metrics):
    order = calculate_material_order(sample_metrics)

    assert order.complexity == RoofComplexity.MODERATE
    assert order.total_squares == 11.2
    assert order.summary == {
        "shingle_bundles": 34,
        "starter_bundles": 2,
        "hip_cap_bundles": 1,
        "ridge_cap_bundles": 2,
        "ice_water_rolls": 2,
        "underlayment_rolls": 2,
        "drip_edge_pieces": 13,
        "valley_metal_pieces": 2,
        "nail_boxes": 1,
    }


def test_line_items_carry_coverage_and_unit(sample_metrics):
    order = calculate_material_order(sample_metrics)
    by_id = {item.material_id: item for item in order.line_items}

    drip = by_id["drip_edge_pieces"]
    assert drip.unit == "pieces"
    assert drip.coverage == 10
    assert drip.coverage_unit == "ft per piece"
    assert drip.product_name == "Drip Edge"

    assert by_id["shingle_bundles"].unit == "bundles"
    assert by_id["ice_water_rolls"].unit == "rolls"
    assert by_id["nail_boxes"].unit == "boxes"
    assert by_id["nail_boxes"].calculation.startswith("3,764 nails")


@pytest.mark.parametrize("complexity, bundles, squares", [
    (RoofComplexity.SIMPLE, 33, 10.7),
    (RoofComplexity.MODERATE, 34, 11.2),
    (RoofComplexity.COMPLEX, 36, 11.7),
])
def test_complexity_sets_shingle_waste(sample_metrics, complexity, bundles, squares):
    order = calculate_material_order(sample_metrics, OrderParams(complexity=complexity))
    assert order.quantity_of("shingle_bundles") == bundles
    assert order.total_squares == squares


def test_no_valley_metal_without_valleys():
    order = calculate_material_order(RoofMetrics(total_area=1000, eaves=80, rakes=40))
    assert "valley_metal_pieces" not in order.summary
    assert order.quantity_of("valley_metal_pieces") == 0


def test_zero_roof_orders_nothing():
    order = calculate_material_order(RoofMetrics.zero())
    assert order.total_squares == 0
    assert all(item.quantity == 0 for item in order.line_items)


def test_accessories_are_appended_as_entered(sample_metrics):
    params = OrderParams(accessories=[
        Accessory(name="Pipe Boot", quantity=3),
        Accessory(name="Box Vent", quantity=0),
    ])
    order = calculate_material_order(sample_metrics, params)

    extras = [item for item in order.line_items if item.material_id == "accessory"]
    assert [(a.product_name, a.quantity) for a in extras] == [("Pipe Boot", 3), ("Box Vent", 0)]
    assert extras[0].unit == "pieces"
    assert extras[0].calculation == "Manual entry"


def test_negative_accessory_quantity_rejected():
    with pytest.raises(ValidationError):
        Accessory(name="Pipe Boot", quantity=-1)


def test_enabled_and_disabled_products(sample_metrics):
    only = calculate_material_order(
        sample_metrics, OrderParams(enabled_materials=["nail_boxes", "drip_edge_pieces"]))
    assert list(only.summary) == ["drip_edge_pieces", "nail_boxes"]

    without = calculate_material_order(
        sample_metrics, OrderParams(disabled_materials=["underlayment_rolls"]))
    assert "underlayment_rolls" not in without.summary
    assert len(without.line_items) == 8


@pytest.mark.parametrize("pattern, total", [
    (NailPattern.STANDARD_4_NAIL, 3360),
    (NailPattern.HURRICANE_6_NAIL, 5040),
    (NailPattern.HIGH_WIND_8_NAIL, 6720),
])
def test_nails_needed_by_pattern(pattern, total):
    assert nails_needed(10, pattern) == (total, 1)


def test_nail_boxes_roll_over():
    assert nails_needed(30, NailPattern.HIGH_WIND_8_NAIL) == (20160, 3)


def test_packages_needed_rounds_up():
    drip = coverage_rule("drip_edge")
    assert packages_needed(100, drip) == 10
    assert packages_needed(100.5, drip) == 11
    assert packages_needed(0, drip) == 0


def test_coverage_catalog_has_all_tiers():
    for rule in COVERAGE_RULES.values():
        assert set(rule.waste_factor) == set(RoofComplexity)
        assert all(factor >= 1 for factor in rule.waste_factor.values())


def test_builder_uses_given_registry(sample_metrics):
    registry = create_order_registry()
    registry.unregister("nail_boxes")
    order = MaterialOrderBuilder(registry).build(sample_metrics)
    assert "nail_boxes" not in order.summary
    assert order.quantity_of("shingle_bundles") == 34


def test_order_params_accept_camel_case():
    params = OrderParams.model_validate({
        "complexity": "complex",
        "nailPattern": "hurricane_6_nail",
        "accessories": [{"name": "Pipe Boot", "quantity": 2}],
    })
    assert params.complexity == RoofComplexity.COMPLEX
    assert params.nail_pattern == NailPattern.HURRICANE_6_NAIL
