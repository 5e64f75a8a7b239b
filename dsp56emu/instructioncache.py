"""Model of the program instruction cache: eight sectors of 128 words."""

from __future__ import annotations

from .memory import MemArea, Memory

TOTAL_SIZE = 1024
NUM_SECTORS = 8
SECTOR_SIZE = 128
SECTOR_INVALID = NUM_SECTORS

MASK_VBIT = 0x00007F
MASK_TAG = 0xFFFF80

INIT_PATTERN = 0xFFABCABC


class InstructionCache:
    """Sector bookkeeping for the cache: tags, locks and LRU order.

    Instruction fetches are served straight from program memory.
    """

    def __init__(self) -> None:
        self._memory = [[INIT_PATTERN] * SECTOR_SIZE for _ in range(NUM_SECTORS)]
        self._valid = [[False] * SECTOR_SIZE for _ in range(NUM_SECTORS)]
        self._tags = [MASK_TAG] * NUM_SECTORS
        self._locked = [False] * NUM_SECTORS
        # index 0 is the most recently used sector, the last one the least
        self._lru = list(range(NUM_SECTORS - 1, -1, -1))
        self.reset()

    @property
    def lru_order(self) -> tuple[int, ...]:
        """Sectors from most to least recently used."""
        return tuple(self._lru)

    @property
    def locked_sectors(self) -> frozenset[int]:
        return frozenset(s for s, locked in enumerate(self._locked) if locked)

    def tag(self, sector: int) -> int:
        """The address tag a sector is assigned to."""
        return self._tags[sector]

    def reset(self) -> None:
        """Unlock and invalidate every sector and restore the initial LRU order."""
        self._lru = [NUM_SECTORS - s - 1 for s in range(NUM_SECTORS)]
        for s in range(NUM_SECTORS):
            self._flush_sector(s)

    def plock(self, address: int) -> bool:
        """Lock the sector holding address; False if every sector is locked elsewhere."""
        s = self._create_sector_for_address(address)
        if s == SECTOR_INVALID:
            return False
        self._locked[s] = True
        return True

    def pfree(self) -> None:
        """Unlock all sectors."""
        self._locked = [False] * NUM_SECTORS

    def pflushun(self) -> None:
        """Invalidate every unlocked sector; locked sectors keep their contents."""
        for s in range(NUM_SECTORS):
            if not self._locked[s]:
                self._flush_sector(s)

    def fetch(self, memory: Memory, address: int, burst: bool = False) -> int:
        """Fetch an instruction word from program memory."""
        return memory.get(MemArea.P, address)

    def read_memory(self, sector: int, word_index: int) -> int:
        """Read a word stored in a sector."""
        if not (0 <= sector < NUM_SECTORS and 0 <= word_index < SECTOR_SIZE):
            raise IndexError(f"invalid cache address: sector {sector}, word {word_index}")
        return self._memory[sector][word_index]

    def read_memory_at(self, address: int) -> int:
        """Read a word by its linear cache address (sector * 128 + word)."""
        s = address >> 7
        return self.read_memory(s, address - (s << 7))

    def _flush_sector(self, s: int) -> None:
        self._locked[s] = False
        self._tags[s] = MASK_TAG
        self._valid[s] = [False] * SECTOR_SIZE
        self._memory[s] = [INIT_PATTERN] * SECTOR_SIZE

    def _find_sector_by_address(self, address: int) -> int:
        check = address & MASK_TAG
        for s, tag in enumerate(self._tags):
            if tag == check:
                return s
        return SECTOR_INVALID

    def _find_lru_sector(self) -> int:
        for s in reversed(self._lru):
            if not self._locked[s]:
                return s
        return SECTOR_INVALID

    def _set_sector_mru(self, s: int) -> None:
        self._lru.remove(s)
        self._lru.insert(0, s)

    def _initialize_sector(self, s: int, address: int) -> None:
        self._tags[s] = address & MASK_TAG
        self._valid[s] = [False] * SECTOR_SIZE
        self._memory[s] = [INIT_PATTERN] * SECTOR_SIZE

    def _create_sector_for_address(self, address: int) -> int:
        s = self._find_sector_by_address(address)
        if s != SECTOR_INVALID:
            self._set_sector_mru(s)
            return s
        s = self._find_lru_sector()
        if s == SECTOR_INVALID:
            return SECTOR_INVALID
        self._set_sector_mru(s)
        self._initialize_sector(s, address)
        return s