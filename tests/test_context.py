"""Tests for context-local OS selection and exit handling."""

import asyncio
import logging
import threading

import pytest

from vosa import (
    ExitRequest,
    RealOS,
    RealOSConfig,
    VirtualOS,
    VirtualOSConfig,
    catch_exit,
    create_os,
    default_os,
    get_current_os,
    patch,
    patch_virtual,
)


class TestGetCurrentOS:
    """Test the default selection."""

    def test_default_is_real(self):
        assert isinstance(get_current_os(), RealOS)
        assert get_current_os() is default_os()


class TestPatch:
    """Test patch() and patch_virtual()."""

    def test_swaps_and_restores(self):
        vos = VirtualOS()
        with patch(vos) as active:
            assert active is vos
            assert get_current_os() is vos
        assert get_current_os() is default_os()

    def test_nested(self):
        outer, inner = VirtualOS(), VirtualOS()
        with patch(outer):
            with patch(inner):
                assert get_current_os() is inner
            assert get_current_os() is outer
        assert get_current_os() is default_os()

    def test_restores_on_exception(self):
        with pytest.raises(RuntimeError):
            with patch(VirtualOS()):
                raise RuntimeError("boom")
        assert get_current_os() is default_os()

    def test_patch_virtual(self):
        with patch_virtual() as vos:
            assert isinstance(vos, VirtualOS)
            get_current_os().write_file("/home/a.txt", b"x")
            assert vos.read_file("/home/a.txt") == b"x"
        assert get_current_os() is default_os()

    def test_patch_virtual_with_config(self):
        with patch_virtual(VirtualOSConfig(home_dir="/Users/me")) as vos:
            assert vos.user_home_dir() == "/Users/me"

    def test_thread_does_not_see_swap(self):
        """A new thread starts from the default, not the caller's swap."""
        seen = []
        with patch(VirtualOS()):
            thread = threading.Thread(target=lambda: seen.append(get_current_os()))
            thread.start()
            thread.join()
        assert seen == [default_os()]

    def test_tasks_are_isolated(self):
        async def worker(vos, results):
            with patch(vos):
                await asyncio.sleep(0)
                results.append(get_current_os() is vos)

        async def main():
            results = []
            a, b = VirtualOS(), VirtualOS()
            await asyncio.gather(worker(a, results), worker(b, results))
            return results

        assert asyncio.run(main()) == [True, True]
        assert get_current_os() is default_os()

    def test_logs_switch(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="vosa.context"):
            with patch(VirtualOS()):
                pass
        assert "switched to VirtualOS" in caplog.text
        assert "restored RealOS" in caplog.text


class TestCreateOS:
    """Test create_os()."""

    def test_virtual(self):
        vos = create_os(VirtualOSConfig(temp_dir="/scratch"))
        assert isinstance(vos, VirtualOS)
        assert vos.temp_dir() == "/scratch"

    def test_virtual_instances_are_fresh(self):
        assert create_os(VirtualOSConfig()) is not create_os(VirtualOSConfig())

    def test_real(self):
        assert create_os(RealOSConfig()) is default_os()

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unsupported os config"):
            create_os({"type": "virtual"})


class TestExit:
    """Test VirtualOS.exit() and catch_exit()."""

    def test_exit_raises_request(self):
        vos = VirtualOS()
        with pytest.raises(ExitRequest) as excinfo:
            vos.exit(3)
        assert excinfo.value.code == 3

    def test_catch_exit_records_code(self):
        vos = VirtualOS()
        with catch_exit() as status:
            vos.stdout.write(b"bye\n")
            vos.exit(2)
            vos.stdout.write(b"unreachable")
        assert status.exited
        assert status.code == 2
        assert vos.stdout.getvalue() == b"bye\n"

    def test_zero_code_counts_as_exit(self):
        with catch_exit() as status:
            VirtualOS().exit(0)
        assert status.exited is True
        assert status.code == 0

    def test_no_exit(self):
        with catch_exit() as status:
            pass
        assert status.exited is False
        assert status.code is None

    def test_other_errors_propagate(self):
        with pytest.raises(KeyError):
            with catch_exit():
                raise KeyError("x")

    def test_state_survives_exit(self):
        """The filesystem is usable after an exit was caught."""
        vos = VirtualOS()
        with catch_exit():
            vos.write_file("/home/out", b"done")
            vos.exit(1)
        assert vos.read_file("/home/out") == b"done"
