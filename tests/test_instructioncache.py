import pytest

from dsp56emu.instructioncache import (
    INIT_PATTERN,
    MASK_TAG,
    NUM_SECTORS,
    SECTOR_SIZE,
    InstructionCache,
)
from dsp56emu.memory import MemArea, Memory


@pytest.fixture
def cache():
    return InstructionCache()


def test_reset_fills_with_init_pattern(cache):
    assert all(
        cache.read_memory(s, w) == INIT_PATTERN
        for s in range(NUM_SECTORS)
        for w in range(SECTOR_SIZE)
    )


def test_initial_lru_order(cache):
    assert cache.lru_order == (7, 6, 5, 4, 3, 2, 1, 0)
    assert cache.locked_sectors == frozenset()


def test_fetch_reads_program_memory(cache):
    memory = Memory(size=0x400)
    memory.set(MemArea.P, 0x10, 0x123456)
    memory.set(MemArea.X, 0x10, 0x654321)
    assert cache.fetch(memory, 0x10, False) == 0x123456
    assert cache.fetch(memory, 0x10, True) == 0x123456


def test_plock_locks_least_recently_used_sector(cache):
    assert cache.plock(0x100) is True
    locked = cache.locked_sectors
    assert len(locked) == 1
    (sector,) = locked
    assert cache.lru_order[0] == sector
    assert cache.tag(sector) == 0x100 & MASK_TAG
    assert sorted(cache.lru_order) == list(range(NUM_SECTORS))


def test_plock_same_tag_reuses_sector(cache):
    cache.plock(0x200)
    cache.plock(0x27F)
    assert len(cache.locked_sectors) == 1


def test_all_sectors_locked_rejects_new_address(cache):
    addresses = [i * SECTOR_SIZE for i in range(NUM_SECTORS)]
    assert all(cache.plock(a) for a in addresses)
    assert cache.locked_sectors == frozenset(range(NUM_SECTORS))
    assert cache.plock(NUM_SECTORS * SECTOR_SIZE) is False
    # an address already cached can still be locked
    assert cache.plock(addresses[3]) is True


def test_pfree_allows_new_locks(cache):
    for i in range(NUM_SECTORS):
        cache.plock(i * SECTOR_SIZE)
    cache.pfree()
    assert cache.locked_sectors == frozenset()
    assert cache.plock(0x4000) is True


def test_reset_unlocks_and_restores_tags(cache):
    cache.plock(0x300)
    cache.reset()
    assert cache.locked_sectors == frozenset()
    assert all(cache.tag(s) == MASK_TAG for s in range(NUM_SECTORS))


def test_pflushun_keeps_locks(cache):
    cache.plock(0x80)
    before = cache.locked_sectors
    cache.pflushun()
    assert cache.locked_sectors == before


def test_read_memory_at_matches_sector_word(cache):
    assert cache.read_memory_at(1 * SECTOR_SIZE + 5) == cache.read_memory(1, 5)


@pytest.mark.parametrize("sector,word", [(NUM_SECTORS, 0), (0, SECTOR_SIZE), (-1, 0)])
def test_read_memory_out_of_range(cache, sector, word):
    with pytest.raises(IndexError):
        cache.read_memory(sector, word)


def test_read_memory_at_out_of_range(cache):
    with pytest.raises(IndexError):
        cache.read_memory_at(NUM_SECTORS * SECTOR_SIZE)