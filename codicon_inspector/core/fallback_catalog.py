"""Built-in codicon names, used when a stylesheet yields no icons at all."""

from __future__ import annotations

from typing import Tuple

FALLBACK_ICON_NAMES: Tuple[str, ...] = (
    "account",
    "activate-breakpoints",
    "add",
    "alert",
    "archive",
    "array",
    "arrow-both",
    "arrow-down",
    "arrow-left",
    "arrow-right",
    "arrow-small-down",
    "arrow-small-left",
    "arrow-small-right",
    "arrow-small-up",
    "arrow-up",
    "azure",
    "azure-devops",
    "beaker",
    "bell",
    "bell-dot",
    "bell-slash",
    "bell-slash-dot",
    "blank",
    "bold",
    "book",
    "bookmark",
    "bracket-dot",
    "bracket-error",
    "brackets",
    "briefcase",
    "broadcast",
    "browser",
    "bug",
    "calendar",
    "call-incoming",
    "call-outgoing",
    "case-sensitive",
    "check",
    "check-all",
    "checklist",
    "chevron-down",
    "chevron-left",
    "chevron-right",
    "chevron-up",
    "chrome-close",
    "chrome-maximize",
    "chrome-minimize",
    "chrome-restore",
    "circle",
    "circle-filled",
    "circle-large",
    "circle-large-filled",
    "circle-outline",
    "circle-slash",
    "circuit-board",
    "clear-all",
    "clippy",
    "close",
    "close-all",
    "cloud",
    "cloud-download",
    "cloud-upload",
    "code",
    "collapse-all",
    "color-mode",
    "combine",
    "comment",
    "comment-discussion",
    "compass",
    "compass-active",
    "compass-dot",
    "copy",
    "credit-card",
    "dash",
    "dashboard",
    "database",
    "debug",
    "debug-all",
    "debug-alt",
    "debug-alt-small",
    "debug-breakpoint",
    "debug-breakpoint-conditional",
    "debug-breakpoint-conditional-unverified",
    "debug-breakpoint-data",
    "debug-breakpoint-data-unverified",
    "debug-breakpoint-function",
    "debug-breakpoint-function-unverified",
    "debug-breakpoint-log",
    "debug-breakpoint-log-unverified",
    "debug-breakpoint-unsupported",
    "debug-breakpoint-unverified",
    "debug-console",
    "debug-continue",
    "debug-coverage",
    "debug-disconnect",
    "debug-line-by-line",
    "debug-pause",
    "debug-rerun",
    "debug-restart",
    "debug-restart-frame",
    "debug-reverse-continue",
    "debug-stackframe",
    "debug-stackframe-active",
    "debug-start",
    "debug-step-back",
    "debug-step-into",
    "debug-step-out",
    "debug-step-over",
    "debug-stop",
    "desktop-download",
    "device-camera",
    "device-camera-video",
    "device-desktop",
    "device-mobile",
    "diff",
    "diff-added",
    "diff-ignored",
    "diff-modified",
    "diff-removed",
    "diff-renamed",
    "discard",
    "edit",
    "editor-layout",
    "ellipsis",
    "empty-window",
    "error",
    "error-small",
    "exclude",
    "expand-all",
    "export",
    "extensions",
    "eye",
    "eye-closed",
    "feedback",
    "file",
    "file-add",
    "file-binary",
    "file-code",
    "file-directory",
    "file-directory-create",
    "file-media",
    "file-pdf",
    "file-submodule",
    "file-symlink-directory",
    "file-symlink-file",
    "file-zip",
    "files",
    "filter",
    "filter-filled",
    "flame",
    "fold",
    "fold-down",
    "fold-up",
    "folder",
    "folder-active",
    "folder-library",
    "folder-opened",
    "gear",
    "gift",
    "gist-secret",
    "git-branch",
    "git-branch-create",
    "git-branch-delete",
    "git-commit",
    "git-compare",
    "git-merge",
    "git-pull-request",
    "git-pull-request-closed",
    "git-pull-request-create",
    "git-pull-request-draft",
    "github",
    "github-action",
    "github-alt",
    "github-inverted",
    "globe",
    "go-to-file",
    "grabber",
    "graph",
    "graph-left",
    "graph-line",
    "graph-scatter",
    "gripper",
    "group-by-ref-type",
    "heart",
    "heart-filled",
    "history",
    "home",
    "horizontal-rule",
    "hubot",
    "inbox",
    "indent",
    "info",
    "insert",
    "inspect",
    "italic",
    "jersey",
    "json",
    "kebab-vertical",
    "key",
    "law",
    "lightbulb",
    "lightbulb-autofix",
    "link",
    "link-external",
    "list-filter",
    "list-flat",
    "list-ordered",
    "list-selection",
    "list-tree",
    "list-unordered",
    "live-share",
    "loading",
    "location",
    "lock",
    "lock-small",
    "magnet",
    "mail",
    "mail-read",
    "markdown",
    "megaphone",
    "mention",
    "menu",
    "merge",
    "milestone",
    "mirror",
    "mortar-board",
    "move",
    "multiple-windows",
    "mute",
    "new-file",
    "new-folder",
    "newline",
    "no-newline",
    "note",
    "notebook",
    "notebook-template",
    "octoface",
    "open-preview",
    "organization",
    "output",
    "package",
    "paintcan",
    "pass",
    "pass-filled",
    "person",
    "person-add",
    "pie-chart",
    "pin",
    "pinned",
    "pinned-dirty",
    "play",
    "play-circle",
    "plug",
    "preserve-case",
    "preview",
    "primitive-dot",
    "primitive-square",
    "project",
    "pulse",
    "question",
    "quote",
    "radio-tower",
    "reactions",
    "record",
    "record-keys",
    "record-small",
    "redo",
    "references",
    "refresh",
    "regex",
    "remote",
    "remote-explorer",
    "remove",
    "replace",
    "replace-all",
    "reply",
    "repo",
    "repo-clone",
    "repo-create",
    "repo-delete",
    "repo-force-push",
    "repo-forked",
    "repo-pull",
    "repo-push",
    "report",
    "request-changes",
    "rocket",
    "root-folder",
    "root-folder-opened",
    "rss",
    "ruby",
    "run-above",
    "run-all",
    "run-below",
    "run-errors",
    "save",
    "save-all",
    "save-as",
    "screen-full",
    "screen-normal",
    "search",
    "search-stop",
    "server",
    "server-environment",
    "server-process",
    "settings",
    "settings-gear",
    "shield",
    "sign-in",
    "sign-out",
    "smiley",
    "sort-precedence",
    "source-control",
    "split-horizontal",
    "split-vertical",
    "squirrel",
    "star",
    "star-empty",
    "star-full",
    "star-half",
    "stop-circle",
    "symbol-array",
    "symbol-boolean",
    "symbol-class",
    "symbol-color",
    "symbol-constant",
    "symbol-constructor",
    "symbol-enum",
    "symbol-enum-member",
    "symbol-event",
    "symbol-field",
    "symbol-file",
    "symbol-function",
    "symbol-interface",
    "symbol-key",
    "symbol-keyword",
    "symbol-method",
    "symbol-misc",
    "symbol-module",
    "symbol-namespace",
    "symbol-null",
    "symbol-number",
    "symbol-numeric",
    "symbol-object",
    "symbol-operator",
    "symbol-package",
    "symbol-parameter",
    "symbol-property",
    "symbol-reference",
    "symbol-ruler",
    "symbol-snippet",
    "symbol-string",
    "symbol-structure",
    "symbol-text",
    "symbol-type-parameter",
    "symbol-unit",
    "symbol-variable",
    "sync",
    "sync-ignored",
    "table",
    "tag",
    "target",
    "tasklist",
    "telescope",
    "terminal",
    "terminal-bash",
    "terminal-cmd",
    "terminal-debian",
    "terminal-linux",
    "terminal-powershell",
    "terminal-tmux",
    "terminal-ubuntu",
    "text-size",
    "three-bars",
    "thumbsdown",
    "thumbsup",
    "tools",
    "trash",
    "triangle-down",
    "triangle-left",
    "triangle-right",
    "triangle-up",
    "twitter",
    "type-hierarchy",
    "type-hierarchy-sub",
    "type-hierarchy-super",
    "unfold",
    "ungroup-by-ref-type",
    "unlock",
    "unmute",
    "unverified",
    "variable-group",
    "verified",
    "versions",
    "vm",
    "vm-active",
    "vm-connect",
    "vm-outline",
    "vm-running",
    "wand",
    "warning",
    "watch",
    "whitespace",
    "whole-word",
    "window",
    "word-wrap",
    "workspace-trusted",
    "workspace-unknown",
    "workspace-untrusted",
    "zoom-in",
    "zoom-out",
)
