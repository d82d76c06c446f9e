# ajisai

Configuration handling and agent bridges for AI agent presets.

`ajisai` reads and writes a workspace configuration file (`ajisai.yaml` or
`ajisai.yml`) and converts rules and prompts between a neutral preset format
and the Markdown-with-front-matter files understood by Cursor, Windsurf and
GitHub Copilot.

## Installation

```
pip install ajisai
```

## Configuration

```python
from ajisai.manager import ConfigManager

manager = ConfigManager.in_directory(".")   # looks for ajisai.yaml, then ajisai.yml
config = manager.load()                     # raises NoFileToReadError if neither exists

print(config.settings.cache_dir)            # "./.cache/ajisai" unless configured
print(config.settings.namespace)            # "ajisai" unless configured
print(config.imported_package_cache_root("local-rules"))
```

`imported_package_cache_root` returns the absolute cache directory of an
imported package and raises `ConfigError` (from `ajisai.errors`) when the
package is not among the workspace imports.

A configuration file looks like this:

```yaml
settings:
  cacheDir: ./.cache/ajisai
  namespace: ajisai
  experimental: false
package:
  name: my_package
  exports:
    go-guide:
      prompts:
        - go-guide/prompts/**/*.md
      rules:
        - go-guide/rules/**/*.md
workspace:
  imports:
    local-rules:
      type: local
      path: ../shared-rules
    git-rules:
      type: git
      repository: https://example.com/rules.git
      revision: main
      include:
        - go-guide
  integrations:
    cursor:
      enabled: true
    github-copilot:
      enabled: false
    windsurf:
      enabled: true
```

Unknown keys are ignored; an import `type` other than `local` or `git`
raises `ConfigError`.

`ConfigManager(*paths)` accepts only `.yaml` and `.yml` paths; any other
extension raises `UnsupportedConfigFileError`. `load()` reads the first
candidate that exists and fills in defaults with `apply_defaults()`;
`default_config()` returns a configuration made of defaults only.
`save(config)` writes to the first existing candidate, or else the first one,
replacing the file atomically; with no candidates it raises
`NoFileToWriteError`.

`YamlLoader` from `ajisai.yaml_loader` loads or saves a single path without
applying defaults. The model classes (`Config`, `Settings`, `Package`,
`Workspace`, `ImportedPackage`, `LocalImportDetails`, `GitImportDetails`,
`AgentIntegrations`, `ConfigContext`, ...) are dataclasses in `ajisai.config`,
and `ajisai.serializer` offers `serialize_config` and `deserialize_config`
for plain dict data.

## Bridges

Each bridge turns a neutral `RuleItem` or `PromptItem` (from
`ajisai.bridges.base`) into the agent's own form and back, and serializes it
to the text the agent expects.

```python
from ajisai.bridges.base import AttachType, RuleItem, RuleMetadata
from ajisai.bridges.cursor import CursorBridge

bridge = CursorBridge()
rule = RuleItem("go", "Use gofmt.", RuleMetadata(attach=AttachType.GLOB, globs=["*.go"]))

text = bridge.serialize_agent_rule(bridge.to_agent_rule(rule))
# ---
# alwaysApply: false
# description:
# globs: *.go
# ---
# Use gofmt.

restored = bridge.from_agent_rule(bridge.deserialize_agent_rule("go", text))
```

`WindsurfBridge` (`ajisai.bridges.windsurf`) and `GitHubCopilotBridge`
(`ajisai.bridges.github_copilot`) offer the same methods: `to_agent_rule`,
`from_agent_rule`, `to_agent_prompt`, `from_agent_prompt`,
`serialize_agent_rule`, `deserialize_agent_rule`, `serialize_agent_prompt`
and `deserialize_agent_prompt`.

- Attach types that an agent cannot express become manual rules.
- `WindsurfBridge.from_agent_rule` raises `ValueError` for an unknown trigger.
- Malformed front matter raises `FrontMatterError`
  (`parse_markdown_with_metadata` in `ajisai.bridges.base`).

## What this package does not do

It is a library only: there is no command-line tool. It does not fetch
imported packages from local paths or Git repositories, does not fill the
cache directory, and does not write rule or prompt files into an agent's
directories; it provides the configuration model and the format conversions
that such work would use.

## Running the tests

```
pip install -e ".[test]"
pytest
```