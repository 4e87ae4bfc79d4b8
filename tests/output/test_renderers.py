"""Tests for the Rich renderers."""

from __future__ import annotations

from proptour.config.settings import TourSettings
from proptour.output.renderers import render_quiet, render_result
from proptour.services.result import ServiceError, ServiceResult
from proptour.services.tour import TourService


class TestSectionRendering:
    def test_heading_and_lines(self, tour: TourService) -> None:
        output = render_result(tour.stored_properties())
        assert output.splitlines() == ["1. Stored Properties", "Username: AmiTiwari, Age: 25"]

    def test_brackets_printed_literally(self, tour: TourService) -> None:
        output = render_result(tour.lazy_properties())
        assert '["Data1", "Data2", "Data3"]' in output

    def test_verbose_shows_fields(self, tour: TourService) -> None:
        output = render_result(tour.computed_properties(), verbose=True)
        assert "item_count: 2" in output

    def test_non_verbose_hides_fields(self, tour: TourService) -> None:
        output = render_result(tour.computed_properties())
        assert "item_count" not in output


class TestTourRendering:
    def test_all_sections_in_order(self, tour: TourService) -> None:
        output = render_result(tour.run())
        headings = [line for line in output.splitlines() if line[:2].rstrip(".").isdigit()]
        assert headings == [
            "1. Stored Properties",
            "2. Computed Properties",
            "3. Lazy Stored Properties",
            "4. Property Observers",
            "5. Instance Methods",
            "6. Type Methods",
            "7. Mutating Methods",
            "8. Choosing Between Values and References",
        ]

    def test_sections_separated_by_blank_line(self, tour: TourService) -> None:
        output = render_result(tour.run(["stored-properties", "computed-properties"]))
        assert output.splitlines() == [
            "1. Stored Properties",
            "Username: AmiTiwari, Age: 25",
            "",
            "2. Computed Properties",
            "Total items in the cart: 2",
        ]


class TestOtherRenderers:
    def test_sections_table(self, tour: TourService) -> None:
        output = render_result(tour.list_sections())
        assert "stored-properties" in output
        assert "Choosing Between Values and References" in output

    def test_volume(self, tour: TourService) -> None:
        output = render_result(tour.set_volume([2]))
        assert "set_volume" in output
        assert "Volume will change to 2" in output
        assert "volume: 2" in output

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="tour",
            error=ServiceError(
                code="UNKNOWN_SECTION",
                message="Unknown section: x",
                detail={"unknown": ["x"]},
            ),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "tour" in output
        assert output.endswith("Unknown section: x")
        assert "unknown: ['x']" in render_result(result, verbose=True)

    def test_error_message_not_parsed_as_markup(self) -> None:
        result = ServiceResult(
            ok=False,
            op="tour",
            error=ServiceError(
                code="UNKNOWN_SECTION",
                message="Unknown section: [/x]",
                detail={"unknown": ["[/x]"]},
            ),
        )
        assert render_result(result).endswith("Unknown section: [/x]")
        assert "unknown: ['[/x]']" in render_result(result, verbose=True)


class TestRenderQuiet:
    def test_tour_prints_bare_lines(self, settings: TourSettings) -> None:
        output = render_quiet(TourService(settings).run(["instance-methods"]))
        assert output == "Playing Shape of You\nStopping Shape of You"

    def test_section_prints_bare_lines(self, tour: TourService) -> None:
        output = render_quiet(tour.mutating_methods())
        assert output == "Task: Finish Swift tutorial, Completed: true"

    def test_list_prints_ids(self, tour: TourService) -> None:
        assert render_quiet(tour.list_sections()).splitlines()[0] == "stored-properties"

    def test_generic_ok(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="other")) == "OK: other"
