# longvinter

The gameplay rules of a small survival role-playing game, written as plain
Python objects that you can drive from a game loop, a server or a test.

Each object holds game state, changes it through explicit methods, and
reports changes through `Event` objects that callbacks can subscribe to. The
package has no dependencies outside the standard library.

## What is inside

- `longvinter.runtime`: the building blocks the rest uses. `Event` (`add`,
  `remove`, `broadcast`) holds callbacks. `TimerHandle` and `TimerManager`
  (`set_timer`, `clear_timer`, `elapsed`, `advance`) give deterministic timers
  that move forward only when you call `advance`. `print_viewport` writes a
  debug message to standard error and returns it as a `ViewportMessage`.
- `longvinter.gameinfo`: the enumerations (`ItemType`, `EquipmentType`,
  `BuffType`, `QuestType`, `ChatPacketHeader`), the table row types (`ItemRow`,
  `BuffRow`, `CraftRow`, `EncyclopediaRow`, `QuestRow`) and `DataTable`, rows
  looked up by name (integer names are stored as text).
- `longvinter.itemdata`: `ItemData`, the display record for one list entry.
- `longvinter.inventory`: `ItemDatabase`, which holds the item, buff and craft
  tables and whose `item_info` raises `UnknownItemError` for an unknown item
  id, and `GameInstance`, which owns one `ItemDatabase`.
- `longvinter.packet`, `longvinter.session`, `longvinter.threads`,
  `longvinter.netmanager`, `longvinter.chat`: the chat client. A packet is a
  header, a player id and a payload length as little-endian 32-bit integers,
  followed by the payload (`encode_packet`, `decode_packet`). `PacketQueue` is
  a thread-safe queue of up to 200 packets that drops new ones when full.
  `NetworkSession` exchanges packets over TCP, `ReceiveThread` feeds a queue
  from a session, `NetworkManager` keeps named sessions, queues and threads,
  and `ChatClient` ties them together (`start`, `poll`, `send`, `stop`); it
  connects to `127.0.0.1:7070` unless told otherwise and sends text as
  UTF-16LE.
- `longvinter.inventory_component`: `InventoryComponent`, a player's items and
  MK (starting at 2000), with `buy_item`, `sell_item` and `use_item`; using an
  item equips it or applies its buffs to `PlayerStats`.
- `longvinter.equipment`: `EquipmentComponent`, equipped items with one hat,
  gun, rod and saw at a time; an item replaced in its slot goes back to the
  linked inventory.
- `longvinter.encyclopedia`: `EncyclopediaComponent`, the discovered items.
- `longvinter.farmingbox`: `FarmingBoxComponent`, a loot box filled with one to
  five random items with ids from 1 to 17.
- `longvinter.craft`: `CraftComponent`, camp-fire cooking. When the sorted
  ingredients match a recipe exactly, cooking takes four seconds per
  ingredient.
- `longvinter.placeholder`: `PlaceholderComponent`, a pile of dropped items
  that marks itself destroyed two seconds after it becomes empty.
- `longvinter.deco`: placeable decorations (`DecoBase`, `Tent`) and
  `DecoComponent`, which shows a placement preview and places the decoration
  on click.
- `longvinter.viewmodels`: `CampFireItemViewModel`, `CampFireViewModel` and
  `PlayerStateViewModel`, the state behind the camp-fire window and the
  health bar.
- `longvinter.spawnpoint`: `SpawnPoint`, which spawns an actor on the server
  and schedules a replacement after one ends.
- `longvinter.hud`: `MainHud`, which decides which panels (`Panel`) are shown
  when the player clicks something (`ClickTarget`), toggles the inventory (at
  most once per second) or starts moving.
- `longvinter.book` and `longvinter.vendor`: the encyclopedia book's
  categories and entries, the `DiscoveryFeed` of newly obtained items, and the
  layout of vendor list entries (`vendor_entry_layout`).

## Events

```python
from longvinter.runtime import Event

changed = Event()
seen = []
changed.add(seen.append)
changed.broadcast([1, 2, 3])
assert seen == [[1, 2, 3]]
```

## Timers and crafting

Nothing timed happens until the game loop passes time to `advance` (or to a
component's `tick`), so the same calls always give the same result.

```python
from longvinter.craft import CraftComponent
from longvinter.gameinfo import CraftRow, DataTable
from longvinter.inventory import ItemDatabase

recipes = DataTable()
recipes.add_row("100", CraftRow(name="100", required_items=[1, 2]))
craft = CraftComponent(ItemDatabase(craft_table=recipes))

craft.add_item(2)
craft.add_item(1)          # ingredients [1, 2] match the recipe
assert craft.cooking_time == 8.0
craft.tick(8.0)
assert craft.crafted_item_id == 100
```

## What the package does not do

It draws nothing and plays no sound: the HUD and view models only hold state.
There is no physics or collision; `DecoBase.tick` is told how many actors
overlap it. It contains a chat client but no chat server, stores nothing on
disk, and provides no command to run.

## Tests

The tests use pytest, which the `test` extra installs.