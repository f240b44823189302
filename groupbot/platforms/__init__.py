"""Built-in platforms. Importing this package registers them."""

from groupbot.platforms import default, dingtalk, wechatwork

__all__ = ["default", "dingtalk", "wechatwork"]
