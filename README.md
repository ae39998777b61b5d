# deskstat

`deskstat` is a set of small functions that read the state of a Linux system
(processor, memory, swap, battery, network interfaces, host and user,
keyboard lock state, mixer volume) and return each reading as a short string,
ready to be placed in a status bar.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Components

Each component takes one argument (a path, an interface name, a battery name,
or `None` when it needs nothing) and returns a string, or `None` when no value
can be read. Where a file cannot be opened, a line saying so goes to standard
error.

| Module              | Functions |
|---------------------|-----------|
| `deskstat.system`   | `entropy`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `temp` |
| `deskstat.memory`   | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `deskstat.cpu`      | `cpu_freq`, `cpu_perc` |
| `deskstat.battery`  | `battery_perc`, `battery_state`, `battery_remaining` |
| `deskstat.network`  | `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`, `wifi_perc`, `wifi_essid` |
| `deskstat.volume`   | `vol_perc` |

```python
from deskstat.memory import ram_perc
from deskstat.battery import battery_state
from deskstat.system import uptime

print(ram_perc(None), battery_state("BAT0"), uptime(None))
```

`battery_state` gives `+` while charging, `-` while discharging, `o` when full
or not charging and `?` for any other state. `temp` takes a sensor file that
holds millidegrees and returns whole degrees Celsius.

### Readings that compare with the previous call

`cpu_perc`, `netspeed_rx` and `netspeed_tx` report a change since their last
call, so the first call returns `None`. Their state lives in a `CpuUsage` and
two `NetSpeed` objects; make your own instances to keep separate histories or
to read from another location:

```python
from deskstat.cpu import CpuUsage
from deskstat.network import NetSpeed

usage = CpuUsage()                       # reads /proc/stat
rx = NetSpeed("rx_bytes", interval=1000) # interval in milliseconds

usage(None); rx("wlan0")                 # first samples
# ... one interval later ...
print(usage(None), rx("wlan0"))
```

`NetSpeed` divides the byte difference by its `interval`, so call it once per
interval.

### Keyboard

`deskstat.keyboard` works on values you supply rather than querying a display:

```python
from deskstat.keyboard import get_layout, format_indicators

get_layout("pc+us+de:2+inet(evdev)", 0)   # 'us'
format_indicators("cn", 0b01)             # 'Cn'  (caps on, num off)
```

In the format, `c` stands for caps lock and `n` for num lock. A letter on its
own is always shown, upper case when the lock is on. A letter followed by `?`
is shown, case kept, only while the lock is on. Only the first four characters
of the format count.

### Formatting sizes

`deskstat.util.fmt_human` scales a number by 1000 or 1024 and adds the unit
prefix; any other base raises `ValueError`:

```python
from deskstat.util import fmt_human

fmt_human(1536, 1024)   # '1.5 Ki'
fmt_human(2500, 1000)   # '2.5 k'
```

## What it does not do

`deskstat` has no command and no refresh loop. It does not assemble the
readings into a status line or set a window name. That is up to the program
that calls the components. It has no date, disk, file-count, file-reading or
shell-command components, and no window layout code. The readings come from
Linux `/proc` and `/sys` files and Linux ioctls, so other systems are not
covered.