from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import pytest

from pysatl_discrete.families import (
    DiscreteFamily,
    Parametrization,
    UniformDiscreteDistribution,
    constraint,
    parametrization,
)


def _build(parameters: Parametrization) -> UniformDiscreteDistribution:
    parameters = cast(_Range, parameters)
    return UniformDiscreteDistribution(parameters.lower, parameters.upper)


Toy = DiscreteFamily(name="TOY", distr_parametrizations=["range", "centered"], factory=_build)


@parametrization(family=Toy, name="range")
class _Range(Parametrization):
    lower: int
    upper: int

    @constraint(description="lower < upper")
    def check_order(self) -> bool:
        return self.lower < self.upper


@parametrization(family=Toy, name="centered")
class _Centered(Parametrization):
    center: int
    radius: float

    @constraint(description="radius >= 0")
    def check_radius(self) -> bool:
        return self.radius >= 0

    def transform_to_base_parametrization(self) -> Parametrization:
        half = int(self.radius)
        return _Range(lower=self.center - half, upper=self.center + half + 1)


class TestParametrization:
    def test_name_and_parameters(self):
        params = _Range(lower=1, upper=4)

        assert params.name == "range"
        assert params.parameters == {"lower": 1, "upper": 4}
        assert [c.description for c in params.constraints] == ["lower < upper"]

    def test_is_frozen(self):
        params = _Range(lower=1, upper=4)

        with pytest.raises(AttributeError):
            params.lower = 2  # type: ignore[misc]

    def test_validate(self):
        _Range(lower=1, upper=4).validate()

        with pytest.raises(ValueError, match='Constraint "lower < upper" does not hold'):
            _Range(lower=4, upper=4).validate()

    def test_transform_to_base(self):
        assert _Range(lower=0, upper=1).transform_to_base_parametrization() == _Range(0, 1)
        assert _Centered(center=3, radius=2.0).transform_to_base_parametrization() == _Range(1, 6)


class TestFromStrings:
    def test_converts_declared_types(self):
        params = _Centered.from_strings([" 3", "2.5 "])

        assert params == _Centered(center=3, radius=2.5)
        assert isinstance(params.parameters["center"], int)
        assert isinstance(params.parameters["radius"], float)

    def test_integral_float_text_is_accepted_for_int(self):
        assert _Range.from_strings(["1.0", "1e1"]) == _Range(lower=1, upper=10)

    @pytest.mark.parametrize("values", [["1.5", "4"], ["one", "4"]], ids=["fraction", "word"])
    def test_rejects_unparsable_values(self, values):
        with pytest.raises(ValueError, match="for 'lower'"):
            _Range.from_strings(values)

    @pytest.mark.parametrize("values", [[], ["1"], ["1", "2", "3"]])
    def test_rejects_wrong_arity(self, values):
        with pytest.raises(ValueError, match=r"expects 2 value\(s\) \(lower, upper\)"):
            _Range.from_strings(values)

    def test_rejects_unsupported_field_types(self):
        family = DiscreteFamily(name="LABEL", distr_parametrizations=["label"], factory=_build)

        @parametrization(family=family, name="label")
        class _Label(Parametrization):
            label: str

        with pytest.raises(TypeError, match="unsupported type str"):
            _Label.from_strings(["x"])


class TestDecorators:
    def test_registers_with_family(self):
        assert Toy.parametrizations == {"range": _Range, "centered": _Centered}
        assert Toy.base is _Range
        assert Toy.get_parametrization("centered") is _Centered

    def test_constraint_must_be_instance_method(self):
        family = DiscreteFamily(name="BAD", distr_parametrizations=["bad"], factory=_build)

        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(family=family, name="bad")
            class _Bad(Parametrization):
                value: int

                @staticmethod
                @constraint(description="never")
                def check_static() -> bool:
                    return False

    def test_family_method_decorator(self):
        family = DiscreteFamily(name="ALIAS", distr_parametrizations=["pair"], factory=_build)

        @family.parametrization(name="pair")
        class _Pair(Parametrization):
            lower: int
            upper: int

        assert family.base is _Pair
        assert _Pair.__family__ is family
