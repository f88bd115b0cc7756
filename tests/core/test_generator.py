import threading

import pytest

from periphgen.core.encoding import HardwareEnumeration, Variant
from periphgen.core.exceptions import (
    ConfigurationError,
    EncodingIntegrityError,
    NameCollisionError,
    UnknownFamilyError,
)
from periphgen.core.generator import generate_device, generate_family
from periphgen.gpio import GpioFamily
from periphgen.interfaces.description import DeviceDescription, GpioPort, SpiInstance
from periphgen.spi import SpiFamily


class BrokenSpiFamily(SpiFamily):
    """SPI family with a malformed catalog."""

    def catalog(self):
        return (HardwareEnumeration("Broken", "", (Variant("A", 1), Variant("B", 1))),)


class TestGenerateFamily:
    def test_gpio_two_ports(self):
        description = DeviceDescription(
            name="demo", gpio_ports=(GpioPort("PortA"), GpioPort("PortB"))
        )

        output = generate_family(GpioFamily(), description)

        assert [d.module_name for d in output.declarations] == ["port_a", "port_b"]
        assert list(output.files) == ["gpio/__init__.py", "gpio/port_a.py", "gpio/port_b.py"]

    def test_empty_family_still_emits_catalog(self, empty_description):
        output = generate_family(GpioFamily(), empty_description)

        assert output.declarations == ()
        assert [e.name for e in output.catalog] == [
            "DigitalValue",
            "PullDirection",
            "OutputType",
            "OutputSpeed",
        ]
        assert list(output.files) == ["gpio/__init__.py"]

    def test_collision_aborts_family(self):
        description = DeviceDescription(
            name="demo", gpio_ports=(GpioPort("Port-A"), GpioPort("PortA"))
        )

        with pytest.raises(NameCollisionError) as exc_info:
            generate_family(GpioFamily(), description)
        assert {exc_info.value.first, exc_info.value.second} == {"Port-A", "PortA"}

    def test_malformed_catalog_aborts_family(self, stm32_description):
        with pytest.raises(EncodingIntegrityError):
            generate_family(BrokenSpiFamily(), stm32_description)

    def test_generation_is_deterministic(self, stm32_description):
        first = generate_family(SpiFamily(), stm32_description)
        second = generate_family(SpiFamily(), stm32_description)

        assert first.files == second.files


class TestGenerateDevice:
    def test_all_registered_families(self, stm32_description):
        result = generate_device(stm32_description)

        assert result.ok
        assert list(result.outputs) == ["gpio", "spi"]
        files = result.files()
        assert "gpio/gpio_a.py" in files
        assert "spi/spi3.py" in files
        assert "from . import gpio\nfrom . import spi\n" in files["__init__.py"]

    def test_selected_family_only(self, stm32_description):
        result = generate_device(stm32_description, families=["spi"])

        assert list(result.outputs) == ["spi"]
        assert not any(path.startswith("gpio/") for path in result.files())

    def test_unknown_family_raises(self, stm32_description):
        with pytest.raises(UnknownFamilyError):
            generate_device(stm32_description, families=["uart"])

    def test_failure_is_isolated_to_one_family(self):
        description = DeviceDescription(
            name="demo",
            gpio_ports=(GpioPort("PortA"),),
            spi_instances=(SpiInstance("SPI1"), SpiInstance("Spi1")),
        )

        result = generate_device(description)

        assert not result.ok
        assert list(result.outputs) == ["gpio"]
        assert isinstance(result.errors["spi"], NameCollisionError)
        files = result.files()
        assert "gpio/__init__.py" in files
        assert not any(path.startswith("spi/") for path in files)
        assert "from . import spi" not in files["__init__.py"]
        with pytest.raises(NameCollisionError):
            result.raise_for_errors()

    def test_parallel_matches_sequential(self, stm32_description):
        sequential = generate_device(stm32_description)
        parallel = generate_device(stm32_description, parallel=True)

        assert sequential.files() == parallel.files()

    def test_concurrent_runs_are_identical(self, stm32_description):
        results = []

        def worker():
            results.append(generate_device(stm32_description).files())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 4
        assert all(r == results[0] for r in results)

    def test_loader_error_fails_only_its_family(self):
        description = DeviceDescription(
            name="demo",
            spi_instances=(SpiInstance("SPI1"),),
            load_errors=(("gpio", ConfigurationError("GPIO", "no port suffix")),),
        )

        result = generate_device(description)

        assert list(result.outputs) == ["spi"]
        assert isinstance(result.errors["gpio"], ConfigurationError)
        assert "spi/spi1.py" in result.files()

    def test_raise_for_errors_noop_when_ok(self, stm32_description):
        generate_device(stm32_description).raise_for_errors()


class TestGeneratedPackage:
    """Import the generated package and exercise it."""

    def test_gpio_package_imports(self, import_generated, stm32_description):
        files = generate_device(stm32_description).files()
        gpio = import_generated(files, "gpio")

        assert gpio.gpio_a.NAME == "GpioA"
        assert gpio.gpio_f.FAMILY == "gpio"
        assert gpio.PullDirection.FLOATING.val() == 0
        assert gpio.PullDirection.UP.val() == 1
        assert gpio.PullDirection.DOWN.val() == 2
        assert gpio.OutputSpeed.LOW.val() == 0
        assert gpio.OutputSpeed.MEDIUM.val() == 1
        assert gpio.OutputSpeed.HIGH.val() == 3
        assert gpio.OutputType.OPEN_DRAIN.val() == 1

    @pytest.mark.parametrize("value", [True, False])
    def test_generated_digital_value_round_trip(self, import_generated, empty_description, value):
        gpio = import_generated(generate_device(empty_description).files(), "gpio")

        assert gpio.DigitalValue.from_bool(value).as_bool() is value
        assert gpio.DigitalValue.from_bool(value).val() == int(value)

    def test_spi_package_imports(self, import_generated, stm32_description):
        spi = import_generated(generate_device(stm32_description).files(), "spi")

        assert [m.val() for m in spi.BaudRateScale] == list(range(8))
        assert spi.ClockPolarity.IDLE_HIGH.val() == 1
        assert spi.ClockPhase.SECOND_TRANSITION.val() == 1
        assert spi.BidiMode.ONE_LINE_BIDIRECTIONAL.val() == 1
        assert spi.FrameFormat.LSB_FIRST.val() == 1
        assert spi.BitOrder.MSB_FIRST.val() == 0
        assert len(spi.SpiChannelType) == 4
        assert spi.spi2.NAME == "SPI2"

    def test_device_package_exposes_families(self, import_generated, stm32_description):
        device = import_generated(generate_device(stm32_description).files())

        assert device.__all__ == ["gpio", "spi"]
        assert device.gpio.DigitalValue.HIGH.val() == 1

    def test_instance_module_reexports_enumerations(self, import_generated, stm32_description):
        gpio = import_generated(generate_device(stm32_description).files(), "gpio")

        assert gpio.gpio_a.PullDirection is gpio.PullDirection
        assert gpio.gpio_b.OutputSpeed.HIGH.val() == 3
        assert gpio.gpio_c.DigitalValue.from_bool(True) is gpio.DigitalValue.HIGH

    def test_instance_module_imports_directly(self, import_generated, stm32_description):
        port = import_generated(generate_device(stm32_description).files(), "gpio.gpio_d")

        assert port.NAME == "GpioD"
        assert port.OutputType.OPEN_DRAIN.val() == 1

    def test_instance_named_after_builtin(self, import_generated):
        description = DeviceDescription(name="d", gpio_ports=(GpioPort("Int"), GpioPort("Bool")))
        gpio = import_generated(generate_device(description).files(), "gpio")

        assert gpio.int.NAME == "Int"
        assert gpio.bool.NAME == "Bool"
        assert gpio.PullDirection.UP.val() == 1
        assert gpio.DigitalValue.from_bool(True).as_bool() is True

    def test_instance_named_after_enum_helper(self, import_generated):
        description = DeviceDescription(name="d", spi_instances=(SpiInstance("Auto"),))
        spi = import_generated(generate_device(description).files(), "spi")

        assert spi.auto.NAME == "Auto"
        assert spi.auto.FAMILY == "spi"
        assert len(set(spi.SpiChannelType)) == 4
