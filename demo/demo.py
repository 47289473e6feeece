#!/usr/bin/env python3
"""
Demonstration of chibi-ioc.

This demo shows:
1. Binding types and resolving them by constructor parameter name
2. Singletons shared between ids, and unique singletons
3. Dependency groups
4. Automatically generated factories
5. Circular dependency detection
"""

import logging

from chibi_ioc import CircularDependencyError, Container

# Example domain: a small notification service


class Config:
    """Application configuration."""

    def __init__(self):
        self.app_name = "notifier"
        self.debug = True


class Database:
    """Pretend database connection."""

    instances = 0

    def __init__(self, config):
        Database.instances += 1
        self.config = config

    def query(self, sql: str) -> str:
        return f"[{self.config.app_name}] {sql}"


class EmailChannel:
    def send(self, message: str) -> str:
        return f"email: {message}"


class SmsChannel:
    def send(self, message: str) -> str:
        return f"sms: {message}"


class Notification:
    """Built on demand through its factory with a caller-supplied text."""

    def __init__(self, text):
        self.text = text


class Notifier:
    def __init__(self, database, channels, notificationFactory):
        self.database = database
        self.channels = channels
        self.notification_factory = notificationFactory

    def notify(self, text: str) -> list[str]:
        notification = self.notification_factory(text)
        self.database.query(f"INSERT INTO notifications VALUES ('{notification.text}')")
        return [channel.send(notification.text) for channel in self.channels]


class Chicken:
    def __init__(self, egg):
        self.egg = egg


class Egg:
    def __init__(self, chicken):
        self.chicken = chicken


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    container = Container()
    (
        container.bind_singleton("config", Config)
        .bind_singleton("database", Database)
        .bind_singleton("replica", Database)
        .bind_singleton("analytics", Database)
        .create_unique_instance()
        .bind_type("email", EmailChannel)
        .group_on_id("channels")
        .bind_type("sms", SmsChannel)
        .group_on_id("channels")
        .bind_type("notification", Notification)
        .bind_type("notifier", Notifier)
    )

    print("=== Resolution ===")
    notifier = container.resolve("notifier")
    for line in notifier.notify("deploy finished"):
        print(line)

    print("\n=== Singletons ===")
    print("database is replica:", container.resolve("database") is container.resolve("replica"))
    print("database is analytics:", container.resolve("database") is container.resolve("analytics"))
    print("Database constructed", Database.instances, "times")

    print("\n=== Factories ===")
    make_notification = container.resolve("notificationFactory")
    print("factory built:", make_notification("hello").text)

    print("\n=== Circular dependencies ===")
    container.bind_type("chicken", Chicken).bind_type("egg", Egg)
    try:
        container.resolve("chicken")
    except CircularDependencyError as e:
        print("detected:", e)

    print("\n=== can_resolve ===")
    for id in ("notifier", "notifierFactory", "channels", "unknown"):
        print(f"{id}: {container.can_resolve(id)}")


if __name__ == "__main__":
    main()
