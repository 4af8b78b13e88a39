"""
TEI facsimile -> Jekyll 导入 - 核心模块

模块结构：
- tei/        TEI核心（XPath绑定/zone几何/布局计算/批注target解析/文档视图）
- models/     数据模型定义（布局结果/front matter/导入任务）
- config/     运行期配置与Jekyll站点配置
- pipeline/   导入编排与文档写出
- cli         命令行入口
"""

__version__ = "0.1.0"
