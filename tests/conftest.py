"""
Shared fixtures for benchmark ingestion tests.
"""

import logging

import pytest


SAMPLE_REPORT = """# ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## #
#              Yet-Another-Bench-Script              #
#                     v2024-06-09                    #
# https://github.com/masonr/yet-another-bench-script #
# ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## ## #

Sun Jun 16 10:12:51 UTC 2024

Basic System Information:
---------------------------------
Uptime     : 0 days, 0 hours, 3 minutes
Processor  : AMD EPYC 7763 64-Core Processor
CPU cores  : 4 @ 2445.404 MHz
AES-NI     : ✔ Enabled
VM-x/AMD-V : ✔ Enabled
RAM        : 15.6 GiB
Swap       : 0.0 KiB
Disk       : 150.0 GiB
Distro     : Ubuntu 22.04.4 LTS
Kernel     : 5.15.0-112-generic
VM Type    : KVM
IPv4/IPv6  : ✔ Online / ✔ Online

IPv4 Network Information:
---------------------------------
ISP        : The Constant Company, LLC
ASN        : AS20473 The Constant Company, LLC
Location   : Piscataway, New Jersey (NJ)
Country    : United States

fio Disk Speed Tests (Mixed R/W 50/50) (Partition /dev/vda2):
---------------------------------
Block Size | 4k            (IOPS)
  ------   | ---            ----
Read       | 139.28 MB/s  (34.8k)
Write      | 139.65 MB/s  (34.9k)
Total      | 278.94 MB/s  (69.7k)

iperf3 Network Speed Tests (IPv4):
---------------------------------
Provider        | Location (Link)           | Send Speed      | Recv Speed      | Ping
-----           | -----                     | ----            | ----            | ----
Clouvider       | London, UK (10G)          | 1.61 Gbits/sec  | 3.39 Gbits/sec  | 76.8 ms
Vultr           | New York, NY, US (10G)    | 9.41 Gbits/sec  | 924 Mbits/sec   | 1.05 ms

Geekbench 6 Benchmark Test:
---------------------------------
Test            | Value
                |
Single Core     | 1852
Multi Core      | 6241
Full Test       | https://browser.geekbench.com/v6/cpu/6557311

YABS completed in 6 min 25 sec
"""

FULL_DISK_SECTION = """fio Disk Speed Tests (Mixed R/W 50/50) (Partition /dev/sda1):
---------------------------------
Block Size | 4k            (IOPS) | 64k           (IOPS)
  ------   | ---            ----  | ----           ----
Read       | 139.28 MB/s  (34.8k) | 1.53 GB/s    (23.9k)
Write      | 139.65 MB/s  (34.9k) | 1.54 GB/s    (24.1k)
Total      | 278.94 MB/s  (69.7k) | 3.07 GB/s    (48.0k)
           |                      |
Block Size | 512k          (IOPS) | 1m            (IOPS)
  ------   | ---            ----  | ----           ----
Read       | 2.34 GB/s     (4.5k) | 2.40 GB/s     (2.3k)
Write      | 2.46 GB/s     (4.8k) | 2.56 GB/s     (2.5k)
Total      | 4.80 GB/s     (9.3k) | 4.96 GB/s     (4.8k)
"""


@pytest.fixture
def sample_report():
    """Complete YABS report with one 4k disk row and two iperf3 rows"""
    return SAMPLE_REPORT


@pytest.fixture
def full_disk_section():
    """Disk section covering all four block sizes"""
    return FULL_DISK_SECTION


@pytest.fixture
def restore_logging():
    """Put the root logger back the way pytest configured it"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
