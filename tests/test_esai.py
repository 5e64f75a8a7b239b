import pytest

from dsp56emu.esai import (
    Esai,
    EsaiAddress,
    EsaiRcr,
    EsaiSr,
    EsaiTcr,
    PeripheralHost,
)
from dsp56emu.interrupts import InterruptVector56362


class FakeHost(PeripheralHost):
    def __init__(self):
        self.counter = 0
        self.interrupts = []

    def instruction_counter(self):
        return self.counter

    def inject_interrupt(self, vector):
        self.interrupts.append(vector)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def esai(host):
    return Esai(host)


def bit(value, n):
    return (value >> n) & 1


def test_register_addresses():
    assert EsaiAddress(0xFFFFB5) is EsaiAddress.TCR
    assert EsaiAddress(0xFFFFA0) is EsaiAddress.TX0


def test_host_is_abstract():
    with pytest.raises(TypeError):
        PeripheralHost()


def test_exec_idle_without_transmitters(esai, host):
    host.counter = 100000
    esai.exec()
    assert esai.cycles_since_write == 0
    assert host.interrupts == []


def test_exec_waits_for_a_full_sample_period(esai, host):
    esai.write_transmit_control_register(1 << EsaiTcr.TE0)
    host.counter = esai.cycles_per_sample
    esai.exec()
    assert esai.output_fifos[0].empty()
    assert esai.cycles_since_write == esai.cycles_per_sample


def test_exec_transfers_and_signals(esai, host):
    esai.write_transmit_control_register((1 << EsaiTcr.TE0) | (1 << EsaiTcr.TIE) | (1 << EsaiTcr.TLIE))
    esai.write_tx(0, 0x123456)
    host.counter = esai.cycles_per_sample + 1
    esai.exec()
    assert esai.output_fifos[0].pop() == 0x123456
    assert esai.cycles_since_write == 1
    sr = esai.read_status_register()
    assert bit(sr, EsaiSr.TFS) == 1
    assert bit(sr, EsaiSr.TUE) == 1
    assert bit(sr, EsaiSr.TDE) == 1
    assert host.interrupts == [
        InterruptVector56362.ESAI_TRANSMIT_DATA,
        InterruptVector56362.ESAI_TRANSMIT_LAST_SLOT,
    ]


def test_frame_sync_toggles_each_period(esai, host):
    esai.write_transmit_control_register(1 << EsaiTcr.TE1)
    period = esai.cycles_per_sample + 1
    host.counter = period
    esai.exec()
    first = bit(esai.read_status_register(), EsaiSr.TFS)
    host.counter = 2 * period
    esai.exec()
    second = bit(esai.read_status_register(), EsaiSr.TFS)
    assert first != second
    assert len(esai.output_fifos[1]) == 2


def test_write_tx_ignored_when_disabled(esai):
    esai.write_transmit_control_register(1 << EsaiTcr.TE0)
    esai.write_tx(1, 0x555555)
    assert esai.tx[1] == 0


def test_write_tx_clears_tde_when_all_written(esai):
    esai.write_transmit_control_register((1 << EsaiTcr.TE0) | (1 << EsaiTcr.TE1))
    esai.write_status_register((1 << EsaiSr.TDE) | (1 << EsaiSr.TUE))
    esai.write_tx(0, 1)
    assert bit(esai.read_status_register(), EsaiSr.TDE) == 1
    esai.write_tx(1, 2)
    sr = esai.read_status_register()
    assert bit(sr, EsaiSr.TDE) == 0
    assert bit(sr, EsaiSr.TUE) == 0


def test_tue_kept_without_status_read(esai):
    esai.write_transmit_control_register(1 << EsaiTcr.TE0)
    esai.write_status_register((1 << EsaiSr.TDE) | (1 << EsaiSr.TUE))
    esai.write_tx(0, 1)
    sr = esai.read_status_register()
    assert bit(sr, EsaiSr.TUE) == 1
    assert bit(sr, EsaiSr.TDE) == 0


def test_tcr_write_clears_underrun(esai):
    esai.write_status_register(1 << EsaiSr.TUE)
    esai.write_transmit_control_register(0x3F)
    assert bit(esai.read_status_register(), EsaiSr.TUE) == 0
    assert esai.read_transmit_control_register() == 0x3F


def test_read_rx_disabled_returns_zero(esai):
    esai.rx[0] = 0x777777
    assert esai.read_rx(0) == 0


def test_receive_path(esai, host):
    esai.write_receive_control_register(1 << EsaiRcr.RE0)
    esai.write_transmit_control_register(1 << EsaiTcr.TE0)
    esai.input_fifos[0].push(0x00ABCD)
    host.counter = esai.cycles_per_sample + 1
    esai.exec()
    assert esai.read_rx(0) == 0x00ABCD
    assert esai.read_receive_control_register() == 1 << EsaiRcr.RE0


def test_update_pctl_sets_period(esai):
    esai.update_pctl(0)
    assert esai.cycles_per_sample == 128
    esai.update_pctl((1 << 20) | 3)
    assert esai.cycles_per_sample == 4 * 128 // 2


def test_status_register_masked_to_18_bits(esai):
    esai.write_status_register(0xFFFFFF)
    assert esai.read_status_register() == (1 << 18) - 1


def test_clock_counter_wraps(esai, host):
    esai.write_transmit_control_register(1 << EsaiTcr.TE0)
    host.counter = 0xFFFFFFF0
    esai.exec()
    esai.cycles_since_write = 0
    host.counter = 0xFFFFFFF0 + 16
    esai.exec()
    assert esai.cycles_since_write == 16