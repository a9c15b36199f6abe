"""心情日记与宠物护理预约：两个控制台记录管理器。"""
__version__ = "0.1.0"
